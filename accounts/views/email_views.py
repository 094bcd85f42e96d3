from rest_framework.views import APIView

from accounts.serializers import VerifyEmailSerializer
from accounts.services import UserService
from core.responses import invalid_input_response, result_response


class VerifyEmailView(APIView):
    authentication_classes = []
    permission_classes = []

    def post(self, request):
        serializer = VerifyEmailSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_input_response(serializer)

        return result_response(UserService().verify_email(serializer.validated_data["code"]))
