from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.views import APIView

from accounts.models import UserRole
from authflow.decorators import role_required
from core.responses import invalid_input_response, result_response
from menu.serializers import InS
from menu.services import DishService


@role_required(UserRole.OWNER)
class DishView(APIView):
    """Adds a dish to one of the caller's restaurants."""

    @extend_schema(request=InS.CreateDishSerializer)
    def post(self, request):
        serializer = InS.CreateDishSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_input_response(serializer)

        result = DishService.create_dish(request.user, **serializer.validated_data)
        return result_response(result, success_status=status.HTTP_201_CREATED)


@role_required(UserRole.OWNER)
class DishDetailView(APIView):

    @extend_schema(request=InS.EditDishSerializer)
    def patch(self, request, dish_id):
        serializer = InS.EditDishSerializer(data=request.data, partial=True)
        if not serializer.is_valid():
            return invalid_input_response(serializer)

        result = DishService.edit_dish(request.user, dish_id, **serializer.validated_data)
        return result_response(result)

    def delete(self, request, dish_id):
        return result_response(DishService.delete_dish(request.user, dish_id))
