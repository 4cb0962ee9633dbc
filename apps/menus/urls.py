from django.urls import path

from . import views

app_name = "menus"

urlpatterns = [
    # --- Storefront ---
    path("menu", views.MenuListView.as_view(), name="menu-list"),  # GET list
    path("menu/category/<str:category>", views.MenuByCategoryView.as_view(), name="menu-category"),  # GET list
    # --- Admin inventory ---
    path("admin/inventory", views.InventoryView.as_view(), name="inventory"),  # GET list, POST create
    path("admin/inventory/stats", views.InventoryStatsView.as_view(), name="inventory-stats"),  # GET
    path("admin/inventory/<int:item_id>", views.InventoryStockView.as_view(), name="inventory-stock"),  # PATCH
    path(
        "admin/inventory/<int:item_id>/availability",
        views.InventoryAvailabilityView.as_view(),
        name="inventory-availability",
    ),  # PATCH
]
