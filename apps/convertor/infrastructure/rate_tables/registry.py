"""
Rate table registry - Maps configured names to table adapters.
This is the glue between settings.EXCHANGE_RATE_TABLE and the actual implementation.
"""

import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from apps.convertor.domain.interfaces import BaseExchangeRateTable
from apps.convertor.infrastructure.rate_tables.currency_beacon import CurrencyBeaconExchangeRateTable
from apps.convertor.infrastructure.rate_tables.fixed import FixedExchangeRateTable

logger = logging.getLogger(__name__)


class RateTableName:
    """
    Names of available rate tables.
    To add a new rate table:
    1. Add a name here
    2. Implement the BaseExchangeRateTable interface with a from_settings() classmethod
    3. Register in EXCHANGE_RATE_TABLE_REGISTRY
    """

    FIXED = "fixed"
    CURRENCY_BEACON = "currency_beacon"


EXCHANGE_RATE_TABLE_REGISTRY: dict[str, type[BaseExchangeRateTable]] = {
    RateTableName.FIXED: FixedExchangeRateTable,
    RateTableName.CURRENCY_BEACON: CurrencyBeaconExchangeRateTable,
}


def get_exchange_rate_table(name: str | None = None) -> BaseExchangeRateTable:
    """
    Get an instance of a rate table by its name.

    Args:
        name: Registered rate table name; defaults to settings.EXCHANGE_RATE_TABLE

    Returns:
        Configured rate table instance

    Raises:
        ImproperlyConfigured: the name is not registered or the table is misconfigured
    """
    if name is None:
        name = getattr(settings, "EXCHANGE_RATE_TABLE", RateTableName.FIXED)

    table_class = EXCHANGE_RATE_TABLE_REGISTRY.get(name)
    if table_class is None:
        raise ImproperlyConfigured(
            f"Rate table '{name}' not found in registry. "
            f"Choose one of: {', '.join(sorted(EXCHANGE_RATE_TABLE_REGISTRY))}"
        )

    logger.debug("Using rate table %s", table_class.__name__)
    return table_class.from_settings()
