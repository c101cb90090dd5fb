from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger

from .container import build_category_service
from .dtos import CreateCategoryDTO
from .serializers import CategoryReadSerializer, CategoryWriteSerializer

logger = get_logger(__name__).bind(component="categories", layer="view")

CATEGORY_ID_PARAMETER = OpenApiParameter(
    "category_id", int, OpenApiParameter.PATH, description="Category ID"
)


@extend_schema(tags=["Categories"])
class CategoryListView(APIView):
    service = build_category_service()
    log = logger.bind(view="CategoryListView")

    @extend_schema(
        operation_id="categories_list",
        summary="List all categories",
        responses={200: CategoryReadSerializer(many=True)},
    )
    def get(self, request):
        self.log.debug("Listing categories")
        data = self.service.list_categories()
        return Response(CategoryReadSerializer(data, many=True).data)

    @extend_schema(
        operation_id="categories_create",
        summary="Create a new category",
        request=CategoryWriteSerializer,
        responses={
            201: CategoryReadSerializer,
            400: OpenApiResponse(
                response=ErrorResponseSerializer,
                description="Invalid input - name is empty or too long",
            ),
            409: OpenApiResponse(
                response=ErrorResponseSerializer,
                description="Category name already exists",
            ),
        },
    )
    def post(self, request):
        serializer = CategoryWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        dto = self.service.create_category(
            CreateCategoryDTO(**serializer.validated_data)
        )
        self.log.info("Category created via API", category_id=dto.id)
        return Response(
            CategoryReadSerializer(dto).data, status=status.HTTP_201_CREATED
        )


@extend_schema(tags=["Categories"])
class CategoryDetailView(APIView):
    service = build_category_service()
    log = logger.bind(view="CategoryDetailView")

    @extend_schema(
        operation_id="categories_retrieve",
        summary="Get a category by its ID",
        parameters=[CATEGORY_ID_PARAMETER],
        responses={
            200: CategoryReadSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, category_id: int):
        self.log.debug("Fetching category detail", category_id=category_id)
        dto = self.service.get_category(category_id)
        return Response(CategoryReadSerializer(dto).data)

    @extend_schema(
        operation_id="categories_update",
        summary="Update a category",
        parameters=[CATEGORY_ID_PARAMETER],
        request=CategoryWriteSerializer,
        responses={
            200: CategoryReadSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
            409: OpenApiResponse(
                response=ErrorResponseSerializer,
                description="Category name already exists",
            ),
        },
    )
    def put(self, request, category_id: int):
        serializer = CategoryWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.info("Replacing category", category_id=category_id)
        dto = self.service.update_category(
            category_id, CreateCategoryDTO(**serializer.validated_data)
        )
        return Response(CategoryReadSerializer(dto).data)

    @extend_schema(
        operation_id="categories_partial_update",
        summary="Partially update a category",
        description="Fields omitted from the body or sent as null keep their stored value.",
        parameters=[CATEGORY_ID_PARAMETER],
        request=CategoryWriteSerializer,
        responses={
            200: CategoryReadSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
            409: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def patch(self, request, category_id: int):
        serializer = CategoryWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        self.log.info("Patching category", category_id=category_id)
        dto = self.service.update_category(
            category_id, CreateCategoryDTO(**serializer.validated_data)
        )
        return Response(CategoryReadSerializer(dto).data)

    @extend_schema(
        operation_id="categories_destroy",
        summary="Delete a category",
        parameters=[CATEGORY_ID_PARAMETER],
        responses={204: None, 404: OpenApiResponse(response=ErrorResponseSerializer)},
    )
    def delete(self, request, category_id: int):
        self.log.info("Deleting category", category_id=category_id)
        self.service.delete_category(category_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
