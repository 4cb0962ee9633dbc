from django.urls import path

from apps.cart import views

app_name = "cart"

urlpatterns = [
    path("cart", views.CartView.as_view(), name="cart"),  # GET, PATCH, DELETE
    path("cart/items", views.CartItemsView.as_view(), name="cart-items"),  # POST add
    path("cart/items/<str:item_id>", views.CartItemDetailView.as_view(), name="cart-item"),  # PATCH, DELETE
    path("cart/checkout", views.CartCheckoutView.as_view(), name="cart-checkout"),  # POST
]
