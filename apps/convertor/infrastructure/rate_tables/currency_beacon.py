import logging
from decimal import Decimal, InvalidOperation

import requests
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from apps.convertor.domain.exceptions import ExternalServiceFailureError
from apps.convertor.domain.interfaces import BaseExchangeRateTable
from apps.convertor.domain.models import Currency

logger = logging.getLogger(__name__)


class CurrencyBeaconExchangeRateTable(BaseExchangeRateTable):
    """
    CurrencyBeacon API rate table.
    Uses /latest endpoint to fetch the current exchange rate.
    """

    def __init__(self, base_url: str, api_key: str, timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout

    @classmethod
    def from_settings(cls) -> "CurrencyBeaconExchangeRateTable":
        base_url = getattr(settings, "CURRENCY_BEACON_URL", "")
        api_key = getattr(settings, "CURRENCY_BEACON_API_KEY", "")
        if not base_url or not api_key:
            raise ImproperlyConfigured(
                "CURRENCY_BEACON_URL and CURRENCY_BEACON_API_KEY must be set to use the currency_beacon rate table"
            )
        return cls(base_url, api_key, timeout=getattr(settings, "CURRENCY_BEACON_TIMEOUT", 10))

    def get_exchange_rate(self, source_currency: Currency, target_currency: Currency) -> Decimal | None:
        """
        Fetch the latest exchange rate from CurrencyBeacon API.

        Args:
            source_currency: Base currency (e.g. USD)
            target_currency: Target currency (e.g. EUR)

        Returns:
            Exchange rate as Decimal, or None if the API doesn't know the pair

        Raises:
            ExternalServiceFailureError: the API call failed or returned garbage
        """
        # Format: https://api.currencybeacon.com/v1/latest?api_key=KEY&base=USD&symbols=EUR
        url = (
            f"{self.base_url}/latest"
            f"?api_key={self.api_key}"
            f"&base={source_currency.code}"
            f"&symbols={target_currency.code}"
        )

        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.Timeout as e:
            raise ExternalServiceFailureError(
                f"Timeout calling CurrencyBeacon API for {source_currency}/{target_currency}"
            ) from e
        except requests.exceptions.HTTPError as e:
            raise ExternalServiceFailureError(f"HTTP error from CurrencyBeacon: {e}") from e
        except requests.exceptions.RequestException as e:
            raise ExternalServiceFailureError(f"Error calling CurrencyBeacon: {e}") from e
        except ValueError as e:
            raise ExternalServiceFailureError(f"Invalid JSON from CurrencyBeacon: {e}") from e

        # Response format: {"response": {"rates": {"EUR": 0.85}}}
        try:
            rates = data["response"]["rates"]
            rate = rates.get(target_currency.code)
        except (KeyError, TypeError, AttributeError) as e:
            raise ExternalServiceFailureError(f"Invalid response from CurrencyBeacon: {e!r}") from e

        if rate is None:
            logger.info("CurrencyBeacon has no rate for %s/%s", source_currency, target_currency)
            return None

        try:
            return Decimal(str(rate))
        except InvalidOperation as e:
            raise ExternalServiceFailureError(f"Invalid rate from CurrencyBeacon: {rate!r}") from e
