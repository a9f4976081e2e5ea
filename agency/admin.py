"""
Django admin customizations for the agency app.

Staff can browse and edit vehicles, customers and transactions through
Django's built-in interface next to the JSON API.
"""

from __future__ import annotations

from django.contrib import admin

from .models import Customer, Transaction, Vehicle


@admin.register(Vehicle)
class VehicleAdmin(admin.ModelAdmin):
    list_display = ('brand', 'model', 'year', 'kind', 'price', 'status', 'updated_at')
    search_fields = ('brand', 'model')
    list_filter = ('status', 'kind', 'year')


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ('first_name', 'last_name', 'dni', 'email', 'phone', 'updated_at')
    search_fields = ('first_name', 'last_name', 'dni', 'email', 'phone')


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    list_display = ('id', 'customer_id', 'vehicle_id', 'kind', 'date', 'state', 'updated_at')
    list_filter = ('kind', 'state', 'date')
    search_fields = ('customer__dni', 'customer__last_name', 'vehicle__brand', 'vehicle__model')
