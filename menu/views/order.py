from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.views import APIView

from accounts.models import UserRole
from authflow.decorators import role_required
from core.responses import invalid_input_response, result_response
from menu.serializers import OrS
from menu.services import OrderService


@role_required(UserRole.CLIENT)
class OrderView(APIView):

    @extend_schema(request=OrS.OrderCreateSerializer)
    def post(self, request):
        serializer = OrS.OrderCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_input_response(serializer)

        result = OrderService.create_order(request.user, **serializer.validated_data)
        return result_response(result, success_status=status.HTTP_201_CREATED)
