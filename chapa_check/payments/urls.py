# payments/urls.py
from django.urls import path
from .views import PaymentFormView, InitializePaymentView, VerifyPaymentView

app_name = "payments"

urlpatterns = [
    path("", PaymentFormView.as_view(), name="form"),
    path("initialize", InitializePaymentView.as_view(), name="initialize"),
    path("verify/<str:transaction_id>", VerifyPaymentView.as_view(), name="verify"),
]
