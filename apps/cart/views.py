from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.cart.cart import Cart
from apps.cart.serializers import (
    CartAddSerializer,
    CartQuantitySerializer,
    CartSerializer,
    CartVisibilitySerializer,
)
from apps.cart.services import checkout
from apps.orders.serializers import OrderCustomerSerializer, OrderSerializer
from apps.storage.mixins import StorageMixin


class _SessionCartMixin:
    """Loads the cart from the session and writes it back after a change."""

    failure_message = "Failed to update cart"

    def get_cart(self) -> Cart:
        return Cart.from_session(self.request.session)

    def cart_response(self, cart: Cart, status_code=status.HTTP_200_OK) -> Response:
        cart.save(self.request.session)
        return Response(CartSerializer(cart).data, status=status_code)


@extend_schema_view(
    get=extend_schema(summary="Show the session cart", responses={200: CartSerializer}),
    patch=extend_schema(
        summary="Open or close the cart",
        request=CartVisibilitySerializer,
        responses={200: CartSerializer},
    ),
    delete=extend_schema(summary="Empty the cart", responses={200: CartSerializer}),
)
class CartView(_SessionCartMixin, APIView):
    def get(self, request):
        return Response(CartSerializer(self.get_cart()).data)

    def patch(self, request):
        serializer = CartVisibilitySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        cart = self.get_cart()
        if serializer.validated_data["is_open"]:
            cart.open_cart()
        else:
            cart.close_cart()
        return self.cart_response(cart)

    def delete(self, request):
        cart = self.get_cart()
        cart.clear_cart()
        return self.cart_response(cart)


@extend_schema(summary="Add one unit of a menu item", request=CartAddSerializer, responses={200: CartSerializer})
class CartItemsView(StorageMixin, _SessionCartMixin, APIView):
    def post(self, request):
        serializer = CartAddSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        item = self.get_storage().get_menu_item(serializer.validated_data["menu_item_id"])
        cart = self.get_cart()
        cart.add_item(item)
        return self.cart_response(cart)


@extend_schema_view(
    patch=extend_schema(summary="Set the quantity of a cart entry", request=CartQuantitySerializer),
    delete=extend_schema(summary="Remove a cart entry"),
)
class CartItemDetailView(_SessionCartMixin, APIView):
    def patch(self, request, item_id):
        serializer = CartQuantitySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        cart = self.get_cart()
        cart.update_quantity(item_id, serializer.validated_data["quantity"])
        return self.cart_response(cart)

    def delete(self, request, item_id):
        cart = self.get_cart()
        cart.remove_item(item_id)
        return self.cart_response(cart)


@extend_schema(
    summary="Place an order from the cart",
    request=OrderCustomerSerializer,
    responses={201: OrderSerializer},
)
class CartCheckoutView(StorageMixin, _SessionCartMixin, APIView):
    invalid_message = "Invalid order data"
    failure_message = "Failed to create order"

    def post(self, request):
        serializer = OrderCustomerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        cart = self.get_cart()
        order = checkout(cart, self.get_storage(), serializer.validated_data)
        cart.save(request.session)
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)
