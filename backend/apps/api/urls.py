from django.urls import include, path

urlpatterns = [
    path("", include("apps.images.urls")),
    path("", include("apps.products.urls")),
]
