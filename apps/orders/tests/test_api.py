from django.apps import apps
from django.test import TestCase, override_settings
from rest_framework.test import APIClient


def order_payload(**overrides):
    payload = {
        "customerName": "Rina",
        "customerPhone": "081234567890",
        "customerAddress": "",
        "serviceType": "diambil",
        "paymentMethod": "cash",
        "notes": "Level 3 ya",
        "items": [{"id": 1, "name": "Seblak Original", "price": 15000, "quantity": 2}],
        "totalAmount": 30000,
    }
    payload.update(overrides)
    return payload


@override_settings(STORAGE_PROVIDER="memory")
class OrderApiTests(TestCase):
    def setUp(self):
        self.storage = apps.get_app_config("storage").reset()
        self.client = APIClient()

    def create_order(self, **overrides):
        resp = self.client.post("/api/orders", order_payload(**overrides))
        self.assertEqual(resp.status_code, 201, resp.content)
        return resp.json()

    def test_create_pickup_order(self):
        order = self.create_order()

        self.assertIsInstance(order["id"], int)
        self.assertEqual(order["status"], "pending")
        self.assertEqual(order["totalAmount"], 30000)
        self.assertEqual(order["serviceType"], "diambil")
        self.assertEqual(order["customerAddress"], "")
        self.assertEqual(order["items"], [{"id": 1, "name": "Seblak Original", "price": 15000, "quantity": 2}])
        self.assertTrue(order["createdAt"].endswith("Z"))
        self.assertEqual(self.storage.get_order(order["id"]).customer_name, "Rina")

    def test_create_order_ignores_client_status(self):
        order = self.create_order(status="delivered")
        self.assertEqual(order["status"], "pending")

    def test_delivery_without_address_is_rejected(self):
        resp = self.client.post("/api/orders", order_payload(serviceType="diantar"))

        self.assertEqual(resp.status_code, 400)
        body = resp.json()
        self.assertEqual(body["message"], "Invalid order data")
        self.assertIn("customerAddress", body["errors"])
        self.assertEqual(self.storage.get_all_orders(), [])

    def test_delivery_with_address(self):
        order = self.create_order(serviceType="diantar", customerAddress="Jl. Merdeka No. 10, Bandung")
        self.assertEqual(order["customerAddress"], "Jl. Merdeka No. 10, Bandung")

    def test_short_phone_is_rejected(self):
        resp = self.client.post("/api/orders", order_payload(customerPhone="0812"))
        self.assertEqual(resp.status_code, 400)
        self.assertIn("customerPhone", resp.json()["errors"])

    def test_empty_items_rejected(self):
        resp = self.client.post("/api/orders", order_payload(items=[], totalAmount=0))
        self.assertEqual(resp.status_code, 400)
        self.assertIn("items", resp.json()["errors"])

    def test_mismatched_total_rejected(self):
        resp = self.client.post("/api/orders", order_payload(totalAmount=1000))
        self.assertEqual(resp.status_code, 400)
        self.assertIn("totalAmount", resp.json()["errors"])

    def test_unknown_payment_method_rejected(self):
        resp = self.client.post("/api/orders", order_payload(paymentMethod="bitcoin"))
        self.assertEqual(resp.status_code, 400)
        self.assertIn("paymentMethod", resp.json()["errors"])

    def test_cart_string_ids_are_kept(self):
        items = [{"id": "3", "name": "Seblak Seafood", "price": 25000, "quantity": 1}]
        order = self.create_order(items=items, totalAmount=25000)
        self.assertEqual(order["items"][0]["id"], "3")

    def test_get_order(self):
        created = self.create_order()

        resp = self.client.get(f"/api/orders/{created['id']}")

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), created)

    def test_unknown_order_is_404(self):
        resp = self.client.get("/api/orders/9999")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"message": "Order not found"})

    def test_list_orders_newest_first(self):
        first = self.create_order()
        second = self.create_order(customerName="Dedi")

        resp = self.client.get("/api/orders")

        self.assertEqual(resp.status_code, 200)
        self.assertEqual([order["id"] for order in resp.json()], [second["id"], first["id"]])

    def test_update_status(self):
        order = self.create_order()

        resp = self.client.patch(f"/api/orders/{order['id']}/status", {"status": "confirmed"})

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["status"], "confirmed")
        self.assertEqual(self.storage.get_order(order["id"]).status, "confirmed")

    def test_any_status_may_follow_any_other(self):
        order = self.create_order()
        for status in ("delivered", "pending", "cancelled", "ready"):
            resp = self.client.patch(f"/api/orders/{order['id']}/status", {"status": status})
            self.assertEqual(resp.status_code, 200, status)
        self.assertEqual(self.storage.get_order(order["id"]).status, "ready")

    def test_invalid_status_rejected(self):
        order = self.create_order()

        resp = self.client.patch(f"/api/orders/{order['id']}/status", {"status": "shipped"})

        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["message"], "Invalid status")
        self.assertEqual(self.storage.get_order(order["id"]).status, "pending")

    def test_missing_status_rejected(self):
        order = self.create_order()
        resp = self.client.patch(f"/api/orders/{order['id']}/status", {})
        self.assertEqual(resp.status_code, 400)

    def test_status_of_unknown_order_is_404(self):
        resp = self.client.patch("/api/orders/9999/status", {"status": "ready"})
        self.assertEqual(resp.status_code, 404)

    def test_next_status_follows_the_progression(self):
        order = self.create_order()
        self.assertEqual(order["nextStatus"], "confirmed")

        resp = self.client.patch(f"/api/orders/{order['id']}/status", {"status": "ready"})
        self.assertEqual(resp.json()["nextStatus"], "delivered")

        for status in ("delivered", "cancelled"):
            resp = self.client.patch(f"/api/orders/{order['id']}/status", {"status": status})
            self.assertIsNone(resp.json()["nextStatus"], status)

    def test_malformed_json_uses_message_envelope(self):
        resp = self.client.post("/api/orders", data="{bad", content_type="application/json")

        self.assertEqual(resp.status_code, 400)
        body = resp.json()
        self.assertNotIn("detail", body)
        self.assertTrue(body["message"].startswith("JSON parse error"))
        self.assertEqual(self.storage.get_all_orders(), [])

    def test_oversized_amounts_rejected(self):
        huge = 10**20
        items = [{"id": 1, "name": "Seblak Original", "price": huge, "quantity": 1}]

        resp = self.client.post("/api/orders", order_payload(items=items, totalAmount=huge))

        self.assertEqual(resp.status_code, 400)
        self.assertIn("items", resp.json()["errors"])
        self.assertEqual(self.storage.get_all_orders(), [])

    def test_id_past_the_key_range_is_404(self):
        self.assertEqual(self.client.get("/api/orders/100000000000000000000").status_code, 404)
        resp = self.client.patch("/api/orders/100000000000000000000/status", {"status": "ready"})
        self.assertEqual(resp.status_code, 404)


@override_settings(STORAGE_PROVIDER="memory")
class AdminOrderApiTests(TestCase):
    def setUp(self):
        self.storage = apps.get_app_config("storage").reset()
        self.client = APIClient()
        for name in ("Rina", "Dedi", "Sari"):
            self.client.post("/api/orders", order_payload(customerName=name))
        self.storage.update_order_status(1, "ready")

    def test_list_all(self):
        for params in ({}, {"status": "all"}):
            resp = self.client.get("/api/admin/orders", params)
            self.assertEqual(resp.status_code, 200)
            self.assertEqual(len(resp.json()), 3)

    def test_filter_by_status(self):
        resp = self.client.get("/api/admin/orders", {"status": "pending"})

        self.assertEqual(resp.status_code, 200)
        self.assertEqual({order["customerName"] for order in resp.json()}, {"Dedi", "Sari"})

    def test_filter_by_unknown_status(self):
        resp = self.client.get("/api/admin/orders", {"status": "shipped"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["message"], "Invalid status")

    def test_stats(self):
        resp = self.client.get("/api/admin/orders/stats")

        self.assertEqual(resp.status_code, 200)
        stats = resp.json()
        self.assertEqual(stats["total"], 3)
        self.assertEqual(stats["pending"], 2)
        self.assertEqual(stats["ready"], 1)
        self.assertEqual(stats["cancelled"], 0)

    def test_admin_status_update(self):
        resp = self.client.patch("/api/admin/orders/2/status", {"status": "cancelled"})

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["status"], "cancelled")
        self.assertEqual(self.storage.get_order(2).status, "cancelled")

    def test_admin_status_update_invalid(self):
        resp = self.client.patch("/api/admin/orders/2/status", {"status": "lost"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(self.storage.get_order(2).status, "pending")


@override_settings(STORAGE_PROVIDER="database")
class DatabaseOrderApiTests(TestCase):
    def setUp(self):
        self.storage = apps.get_app_config("storage").reset()
        self.client = APIClient()

    def tearDown(self):
        with override_settings(STORAGE_PROVIDER="memory"):
            apps.get_app_config("storage").reset()

    def test_order_round_trip_through_database(self):
        payload = order_payload(serviceType="diantar", customerAddress="Jl. Asia Afrika 8")
        resp = self.client.post("/api/orders", payload)
        self.assertEqual(resp.status_code, 201, resp.content)
        order_id = resp.json()["id"]

        resp = self.client.patch(f"/api/orders/{order_id}/status", {"status": "preparing"})
        self.assertEqual(resp.status_code, 200)

        resp = self.client.get(f"/api/orders/{order_id}")
        body = resp.json()
        self.assertEqual(body["status"], "preparing")
        self.assertEqual(body["customerAddress"], "Jl. Asia Afrika 8")
        self.assertEqual(body["items"][0]["quantity"], 2)

    def test_unknown_order_is_404(self):
        resp = self.client.get("/api/orders/9999")
        self.assertEqual(resp.status_code, 404)

    def test_oversized_amounts_rejected(self):
        huge = 10**20
        items = [{"id": 1, "name": "Seblak Original", "price": huge, "quantity": 1}]

        resp = self.client.post("/api/orders", order_payload(items=items, totalAmount=huge))

        self.assertEqual(resp.status_code, 400)
        self.assertIn("errors", resp.json())
        self.assertEqual(self.storage.get_all_orders(), [])

    def test_id_past_the_key_range_is_404(self):
        resp = self.client.get("/api/orders/100000000000000000000")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"message": "Order not found"})
