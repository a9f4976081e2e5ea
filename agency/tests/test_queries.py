from django.test import TestCase

from agency.models import Vehicle
from agency.queries import list_vehicles, sort_by_price, vehicle_filter


class VehicleQueryTests(TestCase):
    def setUp(self):
        self.corolla = Vehicle.objects.create(
            brand="Toyota", model="Corolla", year=2020, kind="purchase", price=15000.0
        )
        self.cronos = Vehicle.objects.create(
            brand="Fiat", model="Cronos", year=2022, kind="rental", price=80.0
        )
        self.hilux = Vehicle.objects.create(
            brand="Toyota", model="Hilux", year=2021, kind="purchase", price=32000.0
        )
        self.sold = Vehicle.objects.create(
            brand="Toyota", model="Yaris", year=2019, kind="purchase", price=9000.0, status="sold"
        )
        self.rented = Vehicle.objects.create(
            brand="Ford", model="Ka", year=2018, kind="rental", price=50.0, status="rented"
        )

    def test_only_available_vehicles(self):
        vehicles = list_vehicles()
        self.assertEqual(vehicles, [self.corolla, self.cronos, self.hilux])
        self.assertTrue(all(v.status == "available" for v in vehicles))

    def test_kind_is_exact_match(self):
        vehicles = list_vehicles(kind="purchase")
        self.assertEqual(vehicles, [self.corolla, self.hilux])

    def test_unknown_kind_matches_nothing(self):
        self.assertEqual(list_vehicles(kind="leasing"), [])

    def test_search_brand_or_model_case_insensitive(self):
        self.assertEqual(list_vehicles(search="toyo"), [self.corolla, self.hilux])
        self.assertEqual(list_vehicles(search="RON"), [self.cronos])
        self.assertEqual(list_vehicles(search="olla"), [self.corolla])

    def test_empty_search_is_ignored(self):
        self.assertEqual(list_vehicles(search=""), list_vehicles())

    def test_search_and_kind_combined(self):
        self.assertEqual(list_vehicles(search="a", kind="rental"), [self.cronos])

    def test_sort_price_asc_and_desc(self):
        asc = list_vehicles(sort="price_asc")
        self.assertEqual([v.price for v in asc], [80.0, 15000.0, 32000.0])
        desc = list_vehicles(sort="price_desc")
        self.assertEqual([v.price for v in desc], [32000.0, 15000.0, 80.0])

    def test_unknown_sort_keeps_storage_order(self):
        self.assertEqual(list_vehicles(sort="year"), [self.corolla, self.cronos, self.hilux])

    def test_sort_by_price_is_stable(self):
        same_price = Vehicle.objects.create(
            brand="VW", model="Gol", year=2017, kind="purchase", price=15000.0
        )
        ordered = sort_by_price([self.corolla, same_price, self.cronos], "price_asc")
        self.assertEqual(ordered, [self.cronos, self.corolla, same_price])

    def test_filter_always_includes_status(self):
        query = vehicle_filter()
        self.assertEqual(
            set(Vehicle.objects.filter(query)),
            set(Vehicle.objects.filter(status="available")),
        )
