from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.views import APIView

from accounts.models import UserRole
from authflow.permissions import RolePermission
from core.responses import invalid_input_response, result_response
from menu.serializers import InS, OpS
from menu.services import CategoryService, RestaurantService


def _query_params(serializer_class, request):
    serializer = serializer_class(data=request.query_params)
    return serializer, serializer.is_valid()


# ─── Restaurants ─────────────────────────────────────────────────────────────

class RestaurantListView(APIView):
    """Anyone can browse restaurants, only owners can open one."""
    permission_classes = [RolePermission]
    required_roles = {"POST": [UserRole.OWNER]}

    @extend_schema(parameters=[InS.PageSerializer])
    def get(self, request):
        serializer, valid = _query_params(InS.PageSerializer, request)
        if not valid:
            return invalid_input_response(serializer)

        result = RestaurantService.all_restaurants(serializer.validated_data["page"])
        return result_response(
            result,
            serialize=lambda data: {**data, "results": OpS.RestaurantSerializer(data["results"], many=True).data},
        )

    @extend_schema(request=InS.CreateRestaurantSerializer)
    def post(self, request):
        serializer = InS.CreateRestaurantSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_input_response(serializer)

        result = RestaurantService.create_restaurant(request.user, **serializer.validated_data)
        return result_response(result, success_status=status.HTTP_201_CREATED)


class RestaurantDetailView(APIView):
    permission_classes = [RolePermission]
    required_roles = {"PATCH": [UserRole.OWNER], "DELETE": [UserRole.OWNER]}

    def get(self, request, restaurant_id):
        result = RestaurantService.find_restaurant_by_id(restaurant_id)
        return result_response(
            result,
            serialize=lambda data: {"restaurant": OpS.RestaurantDetailSerializer(data["restaurant"]).data},
        )

    @extend_schema(request=InS.EditRestaurantSerializer)
    def patch(self, request, restaurant_id):
        serializer = InS.EditRestaurantSerializer(data=request.data, partial=True)
        if not serializer.is_valid():
            return invalid_input_response(serializer)

        result = RestaurantService.edit_restaurant(request.user, restaurant_id, **serializer.validated_data)
        return result_response(result)

    def delete(self, request, restaurant_id):
        return result_response(RestaurantService.delete_restaurant(request.user, restaurant_id))


class RestaurantSearchView(APIView):
    permission_classes = []

    @extend_schema(parameters=[InS.SearchSerializer])
    def get(self, request):
        serializer, valid = _query_params(InS.SearchSerializer, request)
        if not valid:
            return invalid_input_response(serializer)

        result = RestaurantService.search_restaurant_by_name(
            serializer.validated_data["query"], serializer.validated_data["page"]
        )
        return result_response(
            result,
            serialize=lambda data: {
                **data,
                "restaurants": OpS.RestaurantSerializer(data["restaurants"], many=True).data,
            },
        )


# ─── Categories ──────────────────────────────────────────────────────────────

class CategoryListView(APIView):
    permission_classes = []

    def get(self, request):
        result = CategoryService.all_categories()
        return result_response(
            result,
            serialize=lambda data: {"categories": OpS.CategorySerializer(data["categories"], many=True).data},
        )


class CategoryDetailView(APIView):
    permission_classes = []

    @extend_schema(parameters=[InS.PageSerializer])
    def get(self, request, slug):
        serializer, valid = _query_params(InS.PageSerializer, request)
        if not valid:
            return invalid_input_response(serializer)

        result = CategoryService.find_category_by_slug(slug, serializer.validated_data["page"])
        return result_response(result, serialize=_serialize_category_page)


def _serialize_category_page(data):
    category = OpS.CategorySerializer(data["category"]).data
    category["restaurants"] = OpS.RestaurantSerializer(data["restaurants"], many=True).data
    return {
        "category": category,
        "total_pages": data["total_pages"],
        "total_results": data["total_results"],
    }
