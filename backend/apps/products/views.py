from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger

from .container import build_product_service
from .dtos import CreateProductDTO
from .serializers import ProductReadSerializer, ProductWriteSerializer

logger = get_logger(__name__).bind(component="products", layer="view")

PRODUCT_ID_PARAMETER = OpenApiParameter("product_id", int, OpenApiParameter.PATH)


@extend_schema(tags=["Products"])
class ProductListView(APIView):
    service = build_product_service()
    log = logger.bind(view="ProductListView")

    @extend_schema(
        operation_id="products_list",
        summary="List products",
        responses={200: ProductReadSerializer(many=True)},
    )
    def get(self, request):
        self.log.debug("Listing products")
        data = self.service.list_products()
        return Response(ProductReadSerializer(data, many=True).data)

    @extend_schema(
        operation_id="products_create",
        summary="Create product",
        description="The product and all of its variations are stored in one transaction.",
        request=ProductWriteSerializer,
        responses={
            201: ProductReadSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.info(
            "Creating product via API", name=serializer.validated_data.get("name")
        )
        dto = self.service.create_product(
            CreateProductDTO.from_raw(serializer.validated_data)
        )
        self.log.info("Product created via API", product_id=dto.id)
        return Response(ProductReadSerializer(dto).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=["Products"])
class ProductDetailView(APIView):
    service = build_product_service()
    log = logger.bind(view="ProductDetailView")

    @extend_schema(
        operation_id="products_retrieve",
        summary="Get product",
        parameters=[PRODUCT_ID_PARAMETER],
        responses={
            200: ProductReadSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, product_id: int):
        self.log.debug("Fetching product detail", product_id=product_id)
        return Response(ProductReadSerializer(self.service.get_product(product_id)).data)

    @extend_schema(
        operation_id="products_update",
        summary="Replace product",
        description="Overwrites the product and replaces its variations.",
        parameters=[PRODUCT_ID_PARAMETER],
        request=ProductWriteSerializer,
        responses={
            200: ProductReadSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request, product_id: int):
        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.info("Replacing product", product_id=product_id)
        dto = self.service.update_product(
            product_id, CreateProductDTO.from_raw(serializer.validated_data)
        )
        return Response(ProductReadSerializer(dto).data)

    @extend_schema(
        operation_id="products_destroy",
        summary="Delete product",
        description="Deleting a product also deletes its variations.",
        parameters=[PRODUCT_ID_PARAMETER],
        responses={204: None, 404: OpenApiResponse(response=ErrorResponseSerializer)},
    )
    def delete(self, request, product_id: int):
        self.log.info("Deleting product", product_id=product_id)
        self.service.delete_product(product_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
