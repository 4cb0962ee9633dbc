from types import SimpleNamespace

from django.test import SimpleTestCase

from apps.cart.cart import Cart
from apps.cart.services import checkout
from apps.common.constants import CART_SESSION_KEY
from apps.common.exceptions import ValidationError
from apps.storage.memory import MemoryStorage

SEBLAK = SimpleNamespace(id=1, name="Seblak Original", price=15000, image="/images/seblak-original.jpg")
ES_TEH = SimpleNamespace(id=7, name="Es Teh Manis", price=5000, image="/images/es-teh.jpg")


class FakeSession(dict):
    modified = False


class CartTests(SimpleTestCase):
    def test_new_cart_is_empty_and_closed(self):
        cart = Cart()
        self.assertEqual(len(cart), 0)
        self.assertFalse(cart.is_open)
        self.assertEqual(cart.get_total_items(), 0)
        self.assertEqual(cart.get_total_price(), 0)

    def test_adding_same_item_increments_quantity(self):
        cart = Cart()
        cart.add_item(SEBLAK)
        cart.add_item(SEBLAK)
        cart.add_item(ES_TEH)

        self.assertEqual(len(cart), 2)
        self.assertEqual(cart.get("1").quantity, 2)
        self.assertEqual(cart.get_total_items(), 3)
        self.assertEqual(cart.get_total_price(), 35000)

    def test_ids_are_stored_as_strings(self):
        cart = Cart()
        entry = cart.add_item(SEBLAK)
        self.assertEqual(entry.id, "1")
        self.assertIn(1, cart)
        self.assertIn("1", cart)

    def test_update_quantity(self):
        cart = Cart()
        cart.add_item(SEBLAK)

        cart.update_quantity("1", 4)

        self.assertEqual(cart.get("1").quantity, 4)
        self.assertEqual(cart.get_total_price(), 60000)

    def test_update_quantity_to_zero_or_less_removes(self):
        for quantity in (0, -2):
            cart = Cart()
            cart.add_item(SEBLAK)
            cart.update_quantity("1", quantity)
            self.assertNotIn("1", cart)

    def test_update_quantity_of_missing_item_is_noop(self):
        cart = Cart()
        cart.update_quantity("99", 3)
        self.assertEqual(len(cart), 0)

    def test_remove_and_clear(self):
        cart = Cart()
        cart.add_item(SEBLAK)
        cart.add_item(ES_TEH)

        cart.remove_item(7)
        self.assertEqual([entry.id for entry in cart], ["1"])
        cart.remove_item("missing")

        cart.clear_cart()
        self.assertEqual(len(cart), 0)

    def test_open_and_close(self):
        cart = Cart()
        cart.open_cart()
        self.assertTrue(cart.is_open)
        cart.close_cart()
        self.assertFalse(cart.is_open)

    def test_session_round_trip(self):
        session = FakeSession()
        cart = Cart()
        cart.add_item(SEBLAK)
        cart.add_item(SEBLAK)
        cart.open_cart()

        cart.save(session)
        restored = Cart.from_session(session)

        self.assertTrue(session.modified)
        self.assertEqual(session[CART_SESSION_KEY]["isOpen"], True)
        self.assertTrue(restored.is_open)
        self.assertEqual(restored.get("1").quantity, 2)
        self.assertEqual(restored.get_total_price(), 30000)

    def test_missing_session_state_gives_empty_cart(self):
        cart = Cart.from_session(FakeSession())
        self.assertEqual(len(cart), 0)
        self.assertFalse(cart.is_open)


class CheckoutTests(SimpleTestCase):
    customer = {
        "customer_name": "Rina",
        "customer_phone": "081234567890",
        "customer_address": "",
        "service_type": "diambil",
        "payment_method": "gopay",
        "notes": None,
    }

    def test_checkout_creates_order_and_empties_cart(self):
        storage = MemoryStorage()
        cart = Cart(is_open=True)
        cart.add_item(SEBLAK)
        cart.add_item(SEBLAK)
        cart.add_item(ES_TEH)

        order = checkout(cart, storage, self.customer)

        self.assertEqual(order.total_amount, 35000)
        self.assertEqual(order.status, "pending")
        self.assertEqual([(line.id, line.quantity) for line in order.items], [("1", 2), ("7", 1)])
        self.assertEqual(storage.get_order(order.id), order)
        self.assertEqual(len(cart), 0)
        self.assertFalse(cart.is_open)

    def test_rejected_checkout_keeps_cart(self):
        storage = MemoryStorage()
        cart = Cart()
        cart.add_item(SEBLAK)

        with self.assertRaises(ValidationError):
            checkout(cart, storage, {**self.customer, "service_type": "diantar"})

        self.assertEqual(len(cart), 1)
        self.assertEqual(storage.get_all_orders(), [])

    def test_empty_cart_cannot_be_checked_out(self):
        storage = MemoryStorage()

        with self.assertRaises(ValidationError) as ctx:
            checkout(Cart(), storage, self.customer)

        self.assertIn("items", ctx.exception.errors)
        self.assertEqual(storage.get_all_orders(), [])
