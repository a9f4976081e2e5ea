"""
agency.views

Vistas JSON de la API de la agencia: autos, clientes y transacciones.
"""

from __future__ import annotations

import json
import logging

from django.core.exceptions import BadRequest
from django.db import DatabaseError, IntegrityError, transaction
from django.http import Http404, JsonResponse
from django.shortcuts import get_object_or_404
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from .forms import CustomerForm, TransactionForm, VehicleForm, merge_for_update
from .models import Customer, Transaction, Vehicle
from .queries import list_vehicles

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------


def _json(data, status: int = 200) -> JsonResponse:
    return JsonResponse(
        data,
        status=status,
        safe=False,
        json_dumps_params={"ensure_ascii": False},
    )


def _error(message: str, *, status: int, errors: dict | None = None) -> JsonResponse:
    body = {"message": message}
    if errors:
        body["errors"] = errors
    return _json(body, status=status)


def _form_error(form) -> JsonResponse:
    errors = form.errors.get_json_data()
    message = "; ".join(
        f"{field}: {' '.join(e['message'] for e in field_errors)}"
        for field, field_errors in errors.items()
    )
    return _error(message, status=400, errors=errors)


def _read_json(request) -> dict:
    try:
        payload = json.loads(request.body.decode("utf-8") or "{}")
    except (UnicodeDecodeError, ValueError):
        raise BadRequest("JSON inválido")
    if not isinstance(payload, dict):
        raise BadRequest("JSON inválido")
    return payload


def _serialize_vehicle(vehicle: Vehicle) -> dict:
    return {
        "id": vehicle.id,
        "brand": vehicle.brand,
        "model": vehicle.model,
        "year": vehicle.year,
        "kind": vehicle.kind,
        "price": float(vehicle.price),
        "status": vehicle.status,
        "details": vehicle.details,
        "images": list(vehicle.images or []),
        "created_at": vehicle.created_at,
        "updated_at": vehicle.updated_at,
    }


def _serialize_customer(customer: Customer) -> dict:
    return {
        "id": customer.id,
        "first_name": customer.first_name,
        "last_name": customer.last_name,
        "email": customer.email,
        "dni": customer.dni,
        "phone": customer.phone,
        "created_at": customer.created_at,
        "updated_at": customer.updated_at,
    }


def _serialize_transaction(txn: Transaction, customer=None, vehicle=None, *, expand: bool = False) -> dict:
    """
    Without ``expand`` the references are plain ids. Expanded references embed
    the full record, or ``None`` when the record no longer exists.
    """
    if expand:
        customer_data = _serialize_customer(customer) if customer else None
        vehicle_data = _serialize_vehicle(vehicle) if vehicle else None
    else:
        customer_data = txn.customer_id
        vehicle_data = txn.vehicle_id
    return {
        "id": txn.id,
        "customer": customer_data,
        "vehicle": vehicle_data,
        "kind": txn.kind,
        "date": txn.date,
        "state": txn.state,
        "created_at": txn.created_at,
        "updated_at": txn.updated_at,
    }


def _expand_transactions(transactions) -> list[dict]:
    """Lookup by id instead of a join, so dangling references are still listed."""
    transactions = list(transactions)
    customers = Customer.objects.in_bulk({t.customer_id for t in transactions})
    vehicles = Vehicle.objects.in_bulk({t.vehicle_id for t in transactions})
    return [
        _serialize_transaction(
            t,
            customers.get(t.customer_id),
            vehicles.get(t.vehicle_id),
            expand=True,
        )
        for t in transactions
    ]


# -----------------------------------------------------------------------------
# Base views
# -----------------------------------------------------------------------------


@method_decorator(csrf_exempt, name="dispatch")
class JsonView(View):
    """Translates lookup, payload and storage failures into JSON responses."""

    not_found_message = "Recurso no encontrado"

    def dispatch(self, request, *args, **kwargs):
        try:
            return super().dispatch(request, *args, **kwargs)
        except Http404:
            return _error(self.not_found_message, status=404)
        except BadRequest as exc:
            return _error(str(exc), status=400)
        except IntegrityError as exc:
            logger.warning("Conflicto de integridad en %s %s: %s", request.method, request.path, exc)
            return _error(str(exc), status=400)
        except DatabaseError as exc:
            logger.exception("Error de base de datos en %s %s", request.method, request.path)
            return _error(str(exc), status=500)

    def http_method_not_allowed(self, request, *args, **kwargs):
        logger.warning("Método no permitido (%s): %s", request.method, request.path)
        response = _error("Método no permitido", status=405)
        response["Allow"] = ", ".join(self._allowed_methods())
        return response


class JsonListView(JsonView):
    model = None
    form_class = None

    def get_objects(self):
        return self.model.objects.all()

    def serialize(self, obj) -> dict:
        raise NotImplementedError

    def serialize_list(self, objects) -> list[dict]:
        return [self.serialize(obj) for obj in objects]

    def get_form_data(self, payload: dict) -> dict:
        return payload

    def get(self, request):
        return _json(self.serialize_list(self.get_objects()))

    def post(self, request):
        payload = _read_json(request)
        form = self.form_class(data=self.get_form_data(payload))
        if not form.is_valid():
            return _form_error(form)
        with transaction.atomic():
            obj = form.save()
        logger.info("%s creado: %s", self.model._meta.verbose_name, obj.pk)
        return _json(self.serialize(obj), status=201)


class JsonDetailView(JsonView):
    model = None
    form_class = None
    deleted_message = ""

    def get_object(self, **kwargs):
        return get_object_or_404(self.model, pk=kwargs["pk"])

    def serialize(self, obj) -> dict:
        raise NotImplementedError

    def serialize_detail(self, obj) -> dict:
        return self.serialize(obj)

    def get(self, request, **kwargs):
        return _json(self.serialize_detail(self.get_object(**kwargs)))

    def get_update_kwargs(self, payload: dict) -> dict:
        return {}

    def put(self, request, **kwargs):
        obj = self.get_object(**kwargs)
        payload = _read_json(request)
        fields = self.form_class._meta.fields
        form = self.form_class(
            data=merge_for_update(obj, payload, fields),
            instance=obj,
            **self.get_update_kwargs(payload),
        )
        if not form.is_valid():
            logger.warning(
                "Error al actualizar %s %s: %s",
                self.model._meta.verbose_name,
                obj.pk,
                form.errors.as_json(),
            )
            return _form_error(form)
        with transaction.atomic():
            obj = form.save()
        return _json(self.serialize(obj))

    def delete(self, request, **kwargs):
        obj = self.get_object(**kwargs)
        pk = obj.pk
        obj.delete()
        logger.info("%s eliminado: %s", self.model._meta.verbose_name, pk)
        return _json({"message": self.deleted_message})


# -----------------------------------------------------------------------------
# Autos
# -----------------------------------------------------------------------------


class VehicleListView(JsonListView):
    model = Vehicle
    form_class = VehicleForm

    def get_objects(self):
        return list_vehicles(
            search=self.request.GET.get("search"),
            sort=self.request.GET.get("sort"),
            kind=self.request.GET.get("kind"),
        )

    def serialize(self, obj) -> dict:
        return _serialize_vehicle(obj)


class VehicleDetailView(JsonDetailView):
    model = Vehicle
    form_class = VehicleForm
    not_found_message = "Auto no encontrado"
    deleted_message = "Auto eliminado"

    def serialize(self, obj) -> dict:
        return _serialize_vehicle(obj)


class VehicleStatusView(JsonView):
    """PUT /vehicles/<pk>/{rent,purchase,available}: overwrite the status, no body."""

    target_status = None
    not_found_message = "Auto no encontrado"

    def put(self, request, pk):
        vehicle = get_object_or_404(Vehicle, pk=pk)
        vehicle.set_status(self.target_status)
        return _json(_serialize_vehicle(vehicle))


# -----------------------------------------------------------------------------
# Clientes
# -----------------------------------------------------------------------------


class CustomerListView(JsonListView):
    model = Customer
    form_class = CustomerForm

    def serialize(self, obj) -> dict:
        return _serialize_customer(obj)


class CustomerDetailView(JsonDetailView):
    model = Customer
    form_class = CustomerForm
    not_found_message = "Cliente no encontrado"
    deleted_message = "Cliente eliminado con éxito"

    def get_object(self, **kwargs):
        """The key is a DNI, or the internal id when no DNI matches."""
        key = kwargs["key"]
        customer = Customer.objects.filter(dni=key).first()
        if customer is None and key.isdigit():
            customer = Customer.objects.filter(pk=int(key)).first()
        if customer is None:
            raise Http404(self.not_found_message)
        return customer

    def serialize(self, obj) -> dict:
        return _serialize_customer(obj)


# -----------------------------------------------------------------------------
# Transacciones
# -----------------------------------------------------------------------------

# Field names sent by older clients on creation.
TRANSACTION_ALIASES = {
    "clienteId": "customer",
    "autoId": "vehicle",
    "tipoTransaccion": "kind",
}


class TransactionListView(JsonListView):
    model = Transaction
    form_class = TransactionForm

    def get_form_data(self, payload: dict) -> dict:
        data = dict(payload)
        for alias, name in TRANSACTION_ALIASES.items():
            if alias in data:
                data.setdefault(name, data.pop(alias))
        return data

    def serialize(self, obj) -> dict:
        return _serialize_transaction(obj)

    def serialize_list(self, objects) -> list[dict]:
        return _expand_transactions(objects)


class TransactionDetailView(JsonDetailView):
    model = Transaction
    form_class = TransactionForm
    not_found_message = "Transacción no encontrada"
    deleted_message = "Transacción eliminada con éxito"

    def get_update_kwargs(self, payload: dict) -> dict:
        kept = [name for name in TransactionForm.references if not payload.get(name)]
        return {"keep_references": kept}

    def serialize(self, obj) -> dict:
        return _serialize_transaction(obj)

    def serialize_detail(self, obj) -> dict:
        return _expand_transactions([obj])[0]


# -----------------------------------------------------------------------------
# Errores a nivel de proyecto
# -----------------------------------------------------------------------------


def json_not_found(request, exception=None):
    return _error("Recurso no encontrado", status=404)


def json_server_error(request):
    return _error("Error interno del servidor", status=500)
