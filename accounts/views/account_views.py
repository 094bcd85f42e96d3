from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from accounts.serializers import CreateAccountSerializer, EditProfileSerializer, UserSerializer
from accounts.services import UserService
from core.responses import invalid_input_response, result_response


def _serialize_user(data):
    return {"user": UserSerializer(data["user"]).data}


class CreateAccountView(APIView):
    """
    Open sign-up. The token is optional here: it only matters when the
    requested role is Admin, which needs an Admin requester.
    """
    permission_classes = []

    def post(self, request):
        serializer = CreateAccountSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_input_response(serializer)

        result = UserService().create_account(requester=request.user, **serializer.validated_data)
        return result_response(result, success_status=status.HTTP_201_CREATED)


class UserProfileView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, user_id):
        result = UserService().find_by_id(user_id)
        return result_response(result, serialize=_serialize_user)


class MeView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return result_response(UserService().find_by_id(request.user.id), serialize=_serialize_user)

    def patch(self, request):
        serializer = EditProfileSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_input_response(serializer)

        result = UserService().edit_profile(request.user.id, **serializer.validated_data)
        return result_response(result, serialize=_serialize_user)

    def delete(self, request):
        return result_response(UserService().delete_account(request.user.id))
