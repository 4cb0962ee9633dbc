from django.urls import path

from apps.orders import views

app_name = "orders"

urlpatterns = [
    path("orders", views.OrderListCreateView.as_view(), name="order-list"),  # GET list, POST create
    path("orders/<int:order_id>", views.OrderDetailView.as_view(), name="order-detail"),  # GET
    path("orders/<int:order_id>/status", views.OrderStatusView.as_view(), name="order-status"),  # PATCH
    # --- Admin ---
    path("admin/orders", views.AdminOrderListView.as_view(), name="admin-order-list"),  # GET list
    path("admin/orders/stats", views.AdminOrderStatsView.as_view(), name="admin-order-stats"),  # GET
    path(
        "admin/orders/<int:order_id>/status",
        views.AdminOrderStatusView.as_view(),
        name="admin-order-status",
    ),  # PATCH
]
