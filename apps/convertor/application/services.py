"""
Application services - wire the domain convertor to configuration and callers.
"""

from django.conf import settings

from apps.convertor.application.dto import ConversionRequestDTO, ConversionResultDTO
from apps.convertor.application.timing import measure_duration
from apps.convertor.domain.models import Currency
from apps.convertor.domain.services import DEFAULT_PRECISION, CurrencyConvertor
from apps.convertor.infrastructure.rate_tables.registry import get_exchange_rate_table


class ConversionService:
    """Runs conversion requests against a CurrencyConvertor."""

    def __init__(self, convertor: CurrencyConvertor):
        self.convertor = convertor

    @classmethod
    def from_settings(cls, table_name: str | None = None) -> "ConversionService":
        """
        Build the service from Django settings.

        Args:
            table_name: Rate table to use; defaults to settings.EXCHANGE_RATE_TABLE
        """
        convertor = CurrencyConvertor(
            get_exchange_rate_table(table_name),
            precision=getattr(settings, "CURRENCY_CONVERTOR_PRECISION", DEFAULT_PRECISION),
        )
        return cls(convertor)

    @measure_duration
    def convert(self, request: ConversionRequestDTO) -> ConversionResultDTO:
        """
        Convert the requested amount.

        Raises:
            InvalidArgumentError: a currency code or the amount is unusable
            UnknownExchangeRateError: no rate could be obtained for the pair
        """
        converted_amount = self.convertor.convert(
            Currency(request.source_currency),
            Currency(request.target_currency),
            request.amount
        )

        return ConversionResultDTO(
            source_currency=request.source_currency,
            target_currency=request.target_currency,
            amount=request.amount,
            converted_amount=converted_amount
        )
