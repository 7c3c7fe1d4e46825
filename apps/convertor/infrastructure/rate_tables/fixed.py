"""
In-memory exchange rate table.
Useful for:
- Development without API keys
- Testing without external API calls
- Deployments with administratively fixed rates
"""

import logging
from decimal import Context, Decimal, InvalidOperation, ROUND_HALF_EVEN
from typing import Mapping

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from apps.convertor.domain.interfaces import BaseExchangeRateTable
from apps.convertor.domain.models import Currency

logger = logging.getLogger(__name__)


class FixedExchangeRateTable(BaseExchangeRateTable):
    """
    Exchange rate table backed by a static mapping.

    Rates are keyed by ``(source_code, target_code)``. When only the reverse
    pair is known and ``derive_inverse`` is enabled, the rate is derived as
    ``1 / reverse_rate``.
    """

    def __init__(
        self,
        rates: Mapping[tuple[str, str], Decimal],
        derive_inverse: bool = True,
        precision: int = 28
    ):
        self._rates = dict(rates)
        self._derive_inverse = derive_inverse
        self._context = Context(prec=precision, rounding=ROUND_HALF_EVEN)

    @classmethod
    def from_settings(cls) -> "FixedExchangeRateTable":
        """
        Build the table from settings.FIXED_EXCHANGE_RATES.

        Keys use the "SOURCE/TARGET" format, values anything Decimal accepts
        as a string, e.g. {"EUR/CZK": "26.25"}.
        """
        rates = {}
        for pair, value in getattr(settings, "FIXED_EXCHANGE_RATES", {}).items():
            source_code, separator, target_code = pair.partition("/")
            if not separator or not source_code or not target_code:
                raise ImproperlyConfigured(
                    f"FIXED_EXCHANGE_RATES key {pair!r} must use the SOURCE/TARGET format"
                )
            try:
                rates[(source_code.upper(), target_code.upper())] = Decimal(str(value))
            except InvalidOperation:
                raise ImproperlyConfigured(f"FIXED_EXCHANGE_RATES value for {pair!r} is not a number: {value!r}")

        return cls(
            rates,
            derive_inverse=getattr(settings, "FIXED_EXCHANGE_RATES_DERIVE_INVERSE", True),
            precision=getattr(settings, "CURRENCY_CONVERTOR_PRECISION", 28),
        )

    def get_exchange_rate(self, source_currency: Currency, target_currency: Currency) -> Decimal | None:
        rate = self._rates.get((source_currency.code, target_currency.code))
        if rate is not None:
            return rate

        if self._derive_inverse:
            reverse_rate = self._rates.get((target_currency.code, source_currency.code))
            if reverse_rate:
                return self._context.divide(Decimal(1), reverse_rate)

        logger.debug("FixedExchangeRateTable: no rate for %s/%s", source_currency, target_currency)
        return None
