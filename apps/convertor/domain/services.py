"""
Domain services - Core business logic.
Converts amounts between currencies using an injected exchange rate table.
"""

import logging
from decimal import Context, Decimal, ROUND_HALF_EVEN

from apps.convertor.domain.exceptions import (
    ExternalServiceFailureError,
    InvalidArgumentError,
    UnknownExchangeRateError,
)
from apps.convertor.domain.interfaces import BaseExchangeRateTable
from apps.convertor.domain.models import Currency

logger = logging.getLogger(__name__)

DEFAULT_PRECISION = 28
TWO_PLACES = Decimal("0.01")


class CurrencyConvertor:
    """
    Domain service converting an amount from one currency to another.

    Conversion strategy:
    1. Reject missing arguments
    2. Same currency: round the amount, no rate lookup
    3. Otherwise look up the rate once and multiply
    4. Round the product half-even to two decimal places

    All arithmetic runs in a context pinned to ``precision`` significant
    digits, so results do not depend on the caller's thread-local context.
    """

    def __init__(self, exchange_rate_table: BaseExchangeRateTable, precision: int = DEFAULT_PRECISION):
        self._exchange_rate_table = exchange_rate_table
        self._context = Context(prec=precision, rounding=ROUND_HALF_EVEN)

    def convert(
        self,
        source_currency: Currency,
        target_currency: Currency,
        source_amount: Decimal
    ) -> Decimal:
        """
        Convert source_amount from source_currency to target_currency.

        Args:
            source_currency: Currency the amount is expressed in
            target_currency: Currency to convert into
            source_amount: Amount to convert (Decimal or int)

        Returns:
            Converted amount with exactly two decimal places

        Raises:
            InvalidArgumentError: an argument is missing or not usable
            UnknownExchangeRateError: the rate is unknown or couldn't be retrieved

        Example:
            >>> convertor = CurrencyConvertor(table)
            >>> convertor.convert(Currency("EUR"), Currency("CZK"), Decimal("1"))
            Decimal('26.25')
        """
        if source_currency is None or target_currency is None or source_amount is None:
            raise InvalidArgumentError("source_currency, target_currency and source_amount are required")

        amount = self._to_decimal(source_amount)

        if source_currency == target_currency:
            logger.debug("Same currency %s, skipping rate lookup", source_currency)
            return self._round(amount)

        try:
            exchange_rate = self._exchange_rate_table.get_exchange_rate(source_currency, target_currency)
        except ExternalServiceFailureError as e:
            logger.warning("Rate lookup failed for %s/%s: %s", source_currency, target_currency, e)
            raise UnknownExchangeRateError(UnknownExchangeRateError.RATE_NOT_RETRIEVED) from e

        if exchange_rate is None:
            logger.info("No rate known for %s/%s", source_currency, target_currency)
            raise UnknownExchangeRateError(UnknownExchangeRateError.UNKNOWN_CURRENCY)

        return self._round(self._context.multiply(amount, exchange_rate))

    def _to_decimal(self, amount) -> Decimal:
        # bool is an int subclass but never a meaningful amount
        if isinstance(amount, Decimal):
            if not amount.is_finite():
                raise InvalidArgumentError(f"source_amount must be a finite number, got {amount}")
            return amount
        if isinstance(amount, int) and not isinstance(amount, bool):
            return Decimal(amount)
        raise InvalidArgumentError(
            f"source_amount must be a Decimal or int, got {type(amount).__name__}"
        )

    def _round(self, value: Decimal) -> Decimal:
        # quantize needs room for every integer digit plus two decimals
        context = self._context.copy()
        context.prec = max(context.prec, value.adjusted() + 3)
        return value.quantize(TWO_PLACES, rounding=ROUND_HALF_EVEN, context=context)
