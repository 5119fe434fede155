# payments/chapa.py
import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

GENERIC_ERROR = {"error": "Something went wrong"}


@dataclass(frozen=True)
class ChapaConfig:
    base_url: str
    secret_key: str
    callback_url: str
    return_url: Optional[str] = None
    timeout: Optional[float] = None


def get_config() -> ChapaConfig:
    return ChapaConfig(
        base_url=settings.CHAPA_BASE_URL.rstrip("/"),
        secret_key=settings.CHAPA_SECRET_KEY,
        callback_url=settings.CHAPA_CALLBACK_URL,
        return_url=getattr(settings, "CHAPA_RETURN_URL", None) or None,
        timeout=getattr(settings, "CHAPA_TIMEOUT", None),
    )


class ChapaClient:
    """
    Outbound calls to the Chapa transaction API.

    Both calls return the gateway's decoded JSON whatever the HTTP status.
    When no usable response comes back (connection error, timeout, body
    that is not JSON or is JSON null) they return GENERIC_ERROR instead of raising.
    """

    def __init__(self, config: ChapaConfig):
        self.config = config

    def _headers(self, json_body=False):
        headers = {"Authorization": f"Bearer {self.config.secret_key}"}
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    def _decode(self, response):
        body = response.json()
        if body is None:
            raise ValueError("gateway returned a null body")
        return body

    def initialize_payment(self, data):
        url = f"{self.config.base_url}/transaction/initialize"
        logger.info("Initializing Chapa transaction tx_ref=%s", data.get("tx_ref"))
        try:
            response = requests.post(
                url,
                headers=self._headers(json_body=True),
                json=data,
                timeout=self.config.timeout,
            )
            return self._decode(response)
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Chapa initialize failed for tx_ref=%s: %r", data.get("tx_ref"), exc)
            return dict(GENERIC_ERROR)

    def verify_payment(self, transaction_id):
        url = f"{self.config.base_url}/transaction/verify/{quote(str(transaction_id), safe='')}"
        logger.info("Verifying Chapa transaction %s", transaction_id)
        try:
            response = requests.get(url, headers=self._headers(), timeout=self.config.timeout)
            return self._decode(response)
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Chapa verify failed for %s: %r", transaction_id, exc)
            return dict(GENERIC_ERROR)


def get_client() -> ChapaClient:
    return ChapaClient(get_config())
