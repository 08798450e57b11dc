# pos/urls.py

from django.urls import path

from pos.views import MenuCategoryListView, MenuItemListView

app_name = "pos"

urlpatterns = [
    path("pos/menu-items/", MenuItemListView.as_view(), name="menu-item-list"),
    path("pos/menu-categories/", MenuCategoryListView.as_view(), name="menu-category-list"),
]
