"""
Forms for the agency API.

The API views feed decoded JSON bodies into these ModelForms, so the entity
validation (required fields, types, choices, e-mail format and uniqueness)
is the one Django derives from the models.
"""

from __future__ import annotations

from django import forms
from django.forms.models import model_to_dict
from django.utils import timezone

from .models import Customer, Transaction, Vehicle


def merge_for_update(instance, payload: dict, fields) -> dict:
    """
    Build the form data for a partial update.

    Each field sent with a truthy value replaces the stored one; fields that
    are missing or falsy (``""``, ``0``, ``None``, ``[]``) keep their value.
    """
    data = model_to_dict(instance, fields=fields)
    for name in fields:
        value = payload.get(name)
        if value:
            data[name] = value
    return data


class JsonModelForm(forms.ModelForm):
    """ModelForm bound to a decoded JSON body."""

    def clean(self):
        cleaned_data = super().clean()
        # CharField.to_python would store str() of a list or an object.
        for name, field in self.fields.items():
            if not isinstance(field, forms.CharField) or isinstance(field, forms.JSONField):
                continue
            if name not in cleaned_data:
                continue
            value = self.data.get(name)
            if value is not None and not isinstance(value, str):
                self.add_error(name, forms.ValidationError("Debe ser un texto.", code="invalid_type"))
        return cleaned_data


class VehicleForm(JsonModelForm):
    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.fields['status'].required = False

    class Meta:
        model = Vehicle
        fields = ['brand', 'model', 'year', 'kind', 'price', 'status', 'details', 'images']

    def clean_status(self) -> str:
        return self.cleaned_data['status'] or Vehicle.STATUS_AVAILABLE

    def clean_images(self) -> list:
        images = self.cleaned_data['images'] or []
        if not isinstance(images, list) or not all(isinstance(url, str) for url in images):
            raise forms.ValidationError('Las imágenes deben ser una lista de URLs.')
        return images


class CustomerForm(JsonModelForm):
    class Meta:
        model = Customer
        fields = ['first_name', 'last_name', 'email', 'dni', 'phone']


class TransactionForm(JsonModelForm):
    # References that keep their stored id on update unless the payload sends a new one.
    references = ('customer', 'vehicle')

    def __init__(self, *args, keep_references=(), **kwargs) -> None:
        super().__init__(*args, **kwargs)
        # A kept reference may point at a deleted record, so it is not revalidated.
        for name in keep_references:
            self.fields.pop(name, None)
        self.fields['state'].required = False
        self.fields['date'].required = False

    class Meta:
        model = Transaction
        fields = ['customer', 'vehicle', 'kind', 'state', 'date']

    def clean_state(self) -> str:
        return self.cleaned_data['state'] or 'pending'

    def clean_date(self):
        return self.cleaned_data['date'] or timezone.now()
