# chapa_check/urls.py
from django.urls import path, include

urlpatterns = [
    path("payment/", include("payments.urls")),
]
