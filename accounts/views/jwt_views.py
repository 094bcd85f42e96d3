from rest_framework.views import APIView

from accounts.serializers import LoginSerializer
from accounts.services import UserService
from core.responses import invalid_input_response, result_response


class LogInView(APIView):
    authentication_classes = []
    permission_classes = []

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_input_response(serializer)

        return result_response(UserService().login(**serializer.validated_data))
