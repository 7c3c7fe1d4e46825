import pytest
from decimal import Decimal

from django.core.exceptions import ImproperlyConfigured

from apps.convertor.domain.models import Currency
from apps.convertor.infrastructure.rate_tables.fixed import FixedExchangeRateTable

EUR = Currency("EUR")
CZK = Currency("CZK")


@pytest.fixture
def table():
    return FixedExchangeRateTable({("EUR", "CZK"): Decimal("26.25")})


def test_get_exchange_rate_known_pair(table):
    """
    Test that a configured pair returns its rate unchanged.
    """
    assert table.get_exchange_rate(EUR, CZK) == Decimal("26.25")


def test_get_exchange_rate_derives_inverse(table):
    """
    Test that the reverse pair is derived with 28 significant digits.
    """
    rate = table.get_exchange_rate(CZK, EUR)

    assert rate == Decimal("0.03809523809523809523809523810")


def test_get_exchange_rate_without_inverse():
    """
    Test that inverse derivation can be switched off.
    """
    table = FixedExchangeRateTable({("EUR", "CZK"): Decimal("26.25")}, derive_inverse=False)

    assert table.get_exchange_rate(CZK, EUR) is None


def test_get_exchange_rate_unknown_pair(table):
    """
    Test that unknown pairs return None.
    """
    assert table.get_exchange_rate(EUR, Currency("USD")) is None


def test_get_exchange_rate_zero_reverse_rate():
    """
    Test that a zero reverse rate is not inverted.
    """
    table = FixedExchangeRateTable({("EUR", "CZK"): Decimal("0")})

    assert table.get_exchange_rate(CZK, EUR) is None


def test_from_settings(settings):
    """
    Test building the table from FIXED_EXCHANGE_RATES.
    """
    settings.FIXED_EXCHANGE_RATES = {"eur/czk": "26.25", "USD/EUR": 0.5}

    table = FixedExchangeRateTable.from_settings()

    assert table.get_exchange_rate(EUR, CZK) == Decimal("26.25")
    assert table.get_exchange_rate(Currency("USD"), EUR) == Decimal("0.5")
    assert table.get_exchange_rate(EUR, Currency("USD")) == Decimal("2")


@pytest.mark.parametrize(
    "rates",
    [
        {"EURCZK": "26.25"},
        {"EUR/": "26.25"},
        {"EUR/CZK": "lots"},
    ],
)
def test_from_settings_invalid(settings, rates):
    """
    Test that malformed settings raise ImproperlyConfigured.
    """
    settings.FIXED_EXCHANGE_RATES = rates

    with pytest.raises(ImproperlyConfigured):
        FixedExchangeRateTable.from_settings()
