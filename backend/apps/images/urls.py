from django.urls import path

from .views import ImageDetailView, ImageListView

urlpatterns = [
    path("image", ImageListView.as_view(), name="images-list"),
    path("image/<int:image_id>", ImageDetailView.as_view(), name="images-detail"),
]
