"""Filter and ordering for the vehicle listing."""

from __future__ import annotations

from django.db.models import Q

from .models import Vehicle

PRICE_ASC = "price_asc"
PRICE_DESC = "price_desc"


def vehicle_filter(search: str | None = None, kind: str | None = None) -> Q:
    """
    Only available vehicles are listed. ``kind`` is an exact match and
    ``search`` a case-insensitive substring of the brand or the model.
    """
    query = Q(status=Vehicle.STATUS_AVAILABLE)
    if kind:
        query &= Q(kind=kind)
    if search:
        query &= Q(brand__icontains=search) | Q(model__icontains=search)
    return query


def sort_by_price(vehicles, sort: str | None) -> list[Vehicle]:
    """Order the fetched vehicles by price; unknown values keep storage order."""
    vehicles = list(vehicles)
    if sort == PRICE_ASC:
        vehicles.sort(key=lambda v: v.price)
    elif sort == PRICE_DESC:
        vehicles.sort(key=lambda v: v.price, reverse=True)
    return vehicles


def list_vehicles(*, search: str | None = None, sort: str | None = None, kind: str | None = None) -> list[Vehicle]:
    queryset = Vehicle.objects.filter(vehicle_filter(search=search, kind=kind))
    return sort_by_price(queryset, sort)
