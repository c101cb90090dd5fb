from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger

from .container import build_image_service
from .dtos import CreateImageDTO
from .serializers import ImageReadSerializer, ImageWriteSerializer

logger = get_logger(__name__).bind(component="images", layer="view")

IMAGE_ID_PARAMETER = OpenApiParameter("image_id", int, OpenApiParameter.PATH)


@extend_schema(tags=["Images"])
class ImageListView(APIView):
    service = build_image_service()
    log = logger.bind(view="ImageListView")

    @extend_schema(
        operation_id="images_list",
        summary="List images",
        responses={200: ImageReadSerializer(many=True)},
    )
    def get(self, request):
        self.log.debug("Listing images")
        data = self.service.list_images()
        return Response(ImageReadSerializer(data, many=True).data)

    @extend_schema(
        operation_id="images_create",
        summary="Create image",
        request=ImageWriteSerializer,
        responses={
            201: ImageReadSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = ImageWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        dto = self.service.create_image(CreateImageDTO(**serializer.validated_data))
        self.log.info("Image created via API", image_id=dto.id)
        return Response(ImageReadSerializer(dto).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=["Images"])
class ImageDetailView(APIView):
    service = build_image_service()
    log = logger.bind(view="ImageDetailView")

    @extend_schema(
        operation_id="images_retrieve",
        summary="Get image",
        parameters=[IMAGE_ID_PARAMETER],
        responses={
            200: ImageReadSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, image_id: int):
        self.log.debug("Fetching image detail", image_id=image_id)
        return Response(ImageReadSerializer(self.service.get_image(image_id)).data)

    @extend_schema(
        operation_id="images_update",
        summary="Replace image",
        description="name, base64 and size are always overwritten; omitted fields become null.",
        parameters=[IMAGE_ID_PARAMETER],
        request=ImageWriteSerializer,
        responses={
            200: ImageReadSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request, image_id: int):
        serializer = ImageWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.info("Replacing image", image_id=image_id)
        dto = self.service.update_image(
            image_id, CreateImageDTO(**serializer.validated_data)
        )
        return Response(ImageReadSerializer(dto).data)

    @extend_schema(
        operation_id="images_destroy",
        summary="Delete image",
        parameters=[IMAGE_ID_PARAMETER],
        responses={204: None, 404: OpenApiResponse(response=ErrorResponseSerializer)},
    )
    def delete(self, request, image_id: int):
        self.log.info("Deleting image", image_id=image_id)
        self.service.delete_image(image_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
