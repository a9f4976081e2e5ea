import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Customer",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("first_name", models.CharField(max_length=50, verbose_name="Nombre")),
                ("last_name", models.CharField(max_length=50, verbose_name="Apellido")),
                ("email", models.EmailField(max_length=254, unique=True, verbose_name="Correo electrónico")),
                ("dni", models.CharField(max_length=20, unique=True, verbose_name="DNI")),
                ("phone", models.CharField(max_length=20, verbose_name="Teléfono")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Creado")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Actualizado")),
            ],
            options={
                "verbose_name": "Cliente",
                "verbose_name_plural": "Clientes",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="Vehicle",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("brand", models.CharField(max_length=50, verbose_name="Marca")),
                ("model", models.CharField(max_length=80, verbose_name="Modelo")),
                ("year", models.PositiveIntegerField(verbose_name="Año")),
                (
                    "kind",
                    models.CharField(
                        choices=[("purchase", "Compra"), ("rental", "Alquiler")],
                        max_length=10,
                        verbose_name="Tipo",
                    ),
                ),
                ("price", models.DecimalField(decimal_places=2, max_digits=12, verbose_name="Precio")),
                (
                    "status",
                    models.CharField(
                        choices=[("available", "Disponible"), ("rented", "Alquilado"), ("sold", "Vendido")],
                        default="available",
                        max_length=10,
                        verbose_name="Estado",
                    ),
                ),
                ("details", models.TextField(blank=True, default="", verbose_name="Detalles")),
                ("images", models.JSONField(blank=True, default=list, verbose_name="Imágenes")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Creado")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Actualizado")),
            ],
            options={
                "verbose_name": "Auto",
                "verbose_name_plural": "Autos",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="Transaction",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "kind",
                    models.CharField(
                        choices=[("purchase", "Compra"), ("rental", "Alquiler")],
                        max_length=10,
                        verbose_name="Tipo",
                    ),
                ),
                ("date", models.DateTimeField(default=django.utils.timezone.now, verbose_name="Fecha")),
                (
                    "state",
                    models.CharField(
                        choices=[("completed", "Completada"), ("pending", "Pendiente"), ("cancelled", "Cancelada")],
                        default="pending",
                        max_length=10,
                        verbose_name="Estado",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Creado")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Actualizado")),
                (
                    "customer",
                    models.ForeignKey(
                        db_constraint=False,
                        on_delete=django.db.models.deletion.DO_NOTHING,
                        related_name="transactions",
                        to="agency.customer",
                        verbose_name="Cliente",
                    ),
                ),
                (
                    "vehicle",
                    models.ForeignKey(
                        db_constraint=False,
                        on_delete=django.db.models.deletion.DO_NOTHING,
                        related_name="transactions",
                        to="agency.vehicle",
                        verbose_name="Auto",
                    ),
                ),
            ],
            options={
                "verbose_name": "Transacción",
                "verbose_name_plural": "Transacciones",
                "ordering": ["id"],
            },
        ),
    ]
