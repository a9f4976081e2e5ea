from __future__ import annotations

from django.urls import path
from . import views

app_name = "agency"

urlpatterns = [
    path("vehicles", views.VehicleListView.as_view(), name="vehicle_list"),
    path("vehicles/<int:pk>", views.VehicleDetailView.as_view(), name="vehicle_detail"),
    path(
        "vehicles/<int:pk>/rent",
        views.VehicleStatusView.as_view(target_status="rented"),
        name="vehicle_rent",
    ),
    path(
        "vehicles/<int:pk>/purchase",
        views.VehicleStatusView.as_view(target_status="sold"),
        name="vehicle_purchase",
    ),
    path(
        "vehicles/<int:pk>/available",
        views.VehicleStatusView.as_view(target_status="available"),
        name="vehicle_available",
    ),

    path("customers", views.CustomerListView.as_view(), name="customer_list"),
    path("customers/<str:key>", views.CustomerDetailView.as_view(), name="customer_detail"),

    path("transactions", views.TransactionListView.as_view(), name="transaction_list"),
    path("transactions/<int:pk>", views.TransactionDetailView.as_view(), name="transaction_detail"),
]
