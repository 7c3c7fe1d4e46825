from abc import ABC, abstractmethod
from decimal import Decimal

from apps.convertor.domain.models import Currency


class BaseExchangeRateTable(ABC):
    @abstractmethod
    def get_exchange_rate(self, source_currency: Currency, target_currency: Currency) -> Decimal | None:
        """
        Return the rate converting one unit of source_currency into target_currency.

        Returns None when the pair is unknown. Raises
        ExternalServiceFailureError when the backing service fails.
        """
