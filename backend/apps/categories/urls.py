from django.urls import path

from .views import CategoryDetailView, CategoryListView

urlpatterns = [
    path("categories", CategoryListView.as_view(), name="categories-list"),
    path(
        "categories/<int:category_id>",
        CategoryDetailView.as_view(),
        name="categories-detail",
    ),
]
