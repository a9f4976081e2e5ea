"""
Data models for the vehicle agency.

This module defines the three entities of the system (vehicles, customers
and transactions) and the way they point at each other. A transaction only
holds weak references to its customer and vehicle: there is no database
constraint and no cascade, so removing a customer or a vehicle leaves the
transaction in place with a dangling reference.
"""

from __future__ import annotations

from django.db import models
from django.utils import timezone


KIND_CHOICES = [
    ('purchase', 'Compra'),
    ('rental', 'Alquiler'),
]


class Vehicle(models.Model):
    """Represents a vehicle listed for purchase or for rental."""

    STATUS_AVAILABLE = 'available'
    STATUS_RENTED = 'rented'
    STATUS_SOLD = 'sold'

    STATUS_CHOICES = [
        (STATUS_AVAILABLE, 'Disponible'),
        (STATUS_RENTED, 'Alquilado'),
        (STATUS_SOLD, 'Vendido'),
    ]

    brand = models.CharField(max_length=50, verbose_name='Marca')
    model = models.CharField(max_length=80, verbose_name='Modelo')
    year = models.PositiveIntegerField(verbose_name='Año')
    kind = models.CharField(max_length=10, choices=KIND_CHOICES, verbose_name='Tipo')
    price = models.FloatField(verbose_name='Precio')
    status = models.CharField(
        max_length=10, choices=STATUS_CHOICES, default=STATUS_AVAILABLE, verbose_name='Estado'
    )
    details = models.TextField(blank=True, default='', verbose_name='Detalles')
    # Ordered list of image URLs.
    images = models.JSONField(default=list, blank=True, verbose_name='Imágenes')
    created_at = models.DateTimeField(auto_now_add=True, verbose_name="Creado")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="Actualizado")

    class Meta:
        verbose_name = 'Auto'
        verbose_name_plural = 'Autos'
        ordering = ['id']

    def __str__(self) -> str:
        return f"{self.brand} {self.model} {self.year}"

    def set_status(self, status: str) -> None:
        """Overwrite the status unconditionally; every transition is allowed."""
        self.status = status
        self.save(update_fields=['status', 'updated_at'])

    def mark_rented(self) -> None:
        self.set_status(self.STATUS_RENTED)

    def mark_sold(self) -> None:
        self.set_status(self.STATUS_SOLD)

    def mark_available(self) -> None:
        self.set_status(self.STATUS_AVAILABLE)


class Customer(models.Model):
    """Represents a customer buying or renting vehicles."""

    first_name = models.CharField(max_length=50, verbose_name='Nombre')
    last_name = models.CharField(max_length=50, verbose_name='Apellido')
    email = models.EmailField(unique=True, verbose_name='Correo electrónico')
    dni = models.CharField(max_length=20, unique=True, verbose_name='DNI')
    phone = models.CharField(max_length=20, verbose_name='Teléfono')
    created_at = models.DateTimeField(auto_now_add=True, verbose_name="Creado")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="Actualizado")

    class Meta:
        verbose_name = 'Cliente'
        verbose_name_plural = 'Clientes'
        ordering = ['id']

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name} ({self.dni})"


class Transaction(models.Model):
    """Records a purchase or a rental of a vehicle by a customer."""

    STATE_CHOICES = [
        ('completed', 'Completada'),
        ('pending', 'Pendiente'),
        ('cancelled', 'Cancelada'),
    ]

    customer = models.ForeignKey(
        Customer,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name='transactions',
        verbose_name='Cliente',
    )
    vehicle = models.ForeignKey(
        Vehicle,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name='transactions',
        verbose_name='Auto',
    )
    kind = models.CharField(max_length=10, choices=KIND_CHOICES, verbose_name='Tipo')
    date = models.DateTimeField(default=timezone.now, verbose_name='Fecha')
    state = models.CharField(
        max_length=10, choices=STATE_CHOICES, default='pending', verbose_name='Estado'
    )
    created_at = models.DateTimeField(auto_now_add=True, verbose_name="Creado")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="Actualizado")

    class Meta:
        verbose_name = 'Transacción'
        verbose_name_plural = 'Transacciones'
        ordering = ['id']

    def __str__(self) -> str:
        return f"{self.get_kind_display()} #{self.pk} ({self.get_state_display()})"
