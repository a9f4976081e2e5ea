import json

from django.test import TestCase
from django.urls import reverse

from agency.models import Customer, Transaction, Vehicle


class TransactionApiTests(TestCase):
    def setUp(self):
        self.customer = Customer.objects.create(
            first_name="Ana",
            last_name="Perez",
            email="ana@example.com",
            dni="30111222",
            phone="555-0101",
        )
        self.vehicle = Vehicle.objects.create(
            brand="Toyota", model="Corolla", year=2020, kind="purchase", price=15000.0
        )

    def _post(self, data):
        return self.client.post(
            reverse("agency:transaction_list"),
            data=json.dumps(data),
            content_type="application/json",
        )

    def test_create_defaults_to_pending(self):
        response = self._post(
            {"customer": self.customer.id, "vehicle": self.vehicle.id, "kind": "purchase"}
        )
        self.assertEqual(response.status_code, 201)
        data = response.json()
        self.assertEqual(data["state"], "pending")
        self.assertEqual(data["customer"], self.customer.id)
        self.assertEqual(data["vehicle"], self.vehicle.id)
        self.assertIsNotNone(data["date"])

    def test_create_with_legacy_field_names(self):
        response = self._post(
            {"clienteId": self.customer.id, "autoId": self.vehicle.id, "tipoTransaccion": "rental"}
        )
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["kind"], "rental")

    def test_create_with_unknown_reference(self):
        response = self._post({"customer": 999, "vehicle": self.vehicle.id, "kind": "purchase"})
        self.assertEqual(response.status_code, 400)
        self.assertIn("customer", response.json()["errors"])

    def test_create_with_invalid_state(self):
        response = self._post(
            {
                "customer": self.customer.id,
                "vehicle": self.vehicle.id,
                "kind": "purchase",
                "state": "archived",
            }
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("state", response.json()["errors"])

    def test_list_and_detail_expand_references(self):
        txn = Transaction.objects.create(customer=self.customer, vehicle=self.vehicle, kind="purchase")

        response = self.client.get(reverse("agency:transaction_list"))
        self.assertEqual(response.status_code, 200)
        item = response.json()[0]
        self.assertEqual(item["customer"]["dni"], "30111222")
        self.assertEqual(item["vehicle"]["model"], "Corolla")

        response = self.client.get(reverse("agency:transaction_detail", args=[txn.id]))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["customer"]["email"], "ana@example.com")

    def test_dangling_reference_expands_to_null(self):
        txn = Transaction.objects.create(customer=self.customer, vehicle=self.vehicle, kind="purchase")
        self.client.delete(reverse("agency:customer_detail", args=["30111222"]))

        response = self.client.get(reverse("agency:transaction_list"))
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(len(data), 1)
        self.assertIsNone(data[0]["customer"])
        self.assertEqual(data[0]["vehicle"]["id"], self.vehicle.id)

        response = self.client.get(reverse("agency:transaction_detail", args=[txn.id]))
        self.assertIsNone(response.json()["customer"])

    def test_partial_update(self):
        txn = Transaction.objects.create(customer=self.customer, vehicle=self.vehicle, kind="purchase")
        response = self.client.put(
            reverse("agency:transaction_detail", args=[txn.id]),
            data=json.dumps({"state": "completed", "kind": ""}),
            content_type="application/json",
        )
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["state"], "completed")
        self.assertEqual(data["kind"], "purchase")
        self.assertEqual(data["customer"], self.customer.id)

    def test_delete(self):
        txn = Transaction.objects.create(customer=self.customer, vehicle=self.vehicle, kind="purchase")
        response = self.client.delete(reverse("agency:transaction_detail", args=[txn.id]))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "Transacción eliminada con éxito"})
        self.assertTrue(Customer.objects.filter(pk=self.customer.pk).exists())

    def test_delete_missing(self):
        response = self.client.delete(reverse("agency:transaction_detail", args=[999]))
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["message"], "Transacción no encontrada")

    def test_update_keeps_dangling_reference(self):
        txn = Transaction.objects.create(customer=self.customer, vehicle=self.vehicle, kind="purchase")
        vehicle_id = self.vehicle.id
        self.client.delete(reverse("agency:vehicle_detail", args=[vehicle_id]))

        response = self.client.put(
            reverse("agency:transaction_detail", args=[txn.id]),
            data=json.dumps({"state": "completed"}),
            content_type="application/json",
        )
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["state"], "completed")
        self.assertEqual(data["vehicle"], vehicle_id)
        self.assertEqual(Transaction.objects.get(pk=txn.id).vehicle_id, vehicle_id)

    def test_update_with_unknown_new_reference(self):
        txn = Transaction.objects.create(customer=self.customer, vehicle=self.vehicle, kind="purchase")
        response = self.client.put(
            reverse("agency:transaction_detail", args=[txn.id]),
            data=json.dumps({"customer": 999}),
            content_type="application/json",
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("customer", response.json()["errors"])
        self.assertEqual(Transaction.objects.get(pk=txn.id).customer_id, self.customer.id)
