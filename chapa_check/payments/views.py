# payments/views.py

import logging
import secrets
import time
from django.views.generic import TemplateView
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.negotiation import DefaultContentNegotiation
from .chapa import get_client


logger = logging.getLogger(__name__)

CURRENCY = "ETB"


def generate_tx_ref():
    # nanosecond clock plus 40 random bits
    return f"tx_{time.time_ns():x}{secrets.token_hex(5)}"


def caller_tx_ref(data):
    tx_ref = data.get("tx_ref")
    if isinstance(tx_ref, str):
        tx_ref = tx_ref.strip()
    return tx_ref


class JSONOnlyNegotiation(DefaultContentNegotiation):
    """Always answer with the first renderer, whatever the Accept header says."""

    def select_renderer(self, request, renderers, format_suffix=None):
        return (renderers[0], renderers[0].media_type)


class PaymentFormView(TemplateView):
    template_name = "payments/initialize.html"


class InitializePaymentView(APIView):
    """
    Forward a payment to Chapa's initialize endpoint.

    Input is not validated here; whatever the caller sent for amount,
    email and names goes to the gateway, and the gateway's answer (or the
    generic error mapping) comes back with a 200.
    """

    content_negotiation_class = JSONOnlyNegotiation

    def post(self, request):
        data = request.data if hasattr(request.data, "get") else {}
        client = get_client()

        chapa_data = {
            "amount": data.get("amount"),
            "currency": CURRENCY,
            "email": data.get("email"),
            "first_name": data.get("first_name"),
            "last_name": data.get("last_name"),
            "tx_ref": caller_tx_ref(data) or generate_tx_ref(),
            "callback_url": client.config.callback_url,
        }
        if client.config.return_url:
            chapa_data["return_url"] = client.config.return_url

        chapa_response = client.initialize_payment(chapa_data)
        logger.debug("Chapa initialize response for %s: %s", chapa_data["tx_ref"], chapa_response)
        return Response(chapa_response, status=status.HTTP_200_OK)


class VerifyPaymentView(APIView):
    content_negotiation_class = JSONOnlyNegotiation

    def get(self, request, transaction_id):
        chapa_response = get_client().verify_payment(transaction_id)
        logger.debug("Chapa verify response for %s: %s", transaction_id, chapa_response)
        return Response(chapa_response, status=status.HTTP_200_OK)
