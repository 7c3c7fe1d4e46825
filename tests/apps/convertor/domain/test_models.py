import pytest

from apps.convertor.domain.exceptions import InvalidArgumentError
from apps.convertor.domain.models import Currency


class TestCurrency:
    """Tests for the Currency value object."""

    def test_currencies_equal_by_code(self):
        """
        Test that equality and hashing use the currency code.
        """
        assert Currency("EUR") == Currency("EUR")
        assert Currency("EUR") != Currency("CZK")
        assert len({Currency("EUR"), Currency("EUR")}) == 1

    def test_currency_str(self):
        """Test that str() gives the bare code."""
        assert str(Currency("CZK")) == "CZK"

    @pytest.mark.parametrize("code", ["", "   ", None, 978])
    def test_currency_rejects_invalid_code(self, code):
        """
        Test that empty or non-string codes are rejected at construction.
        """
        with pytest.raises(InvalidArgumentError):
            Currency(code)

    def test_currency_is_immutable(self):
        """Test that Currency cannot be modified after creation."""
        currency = Currency("EUR")

        with pytest.raises(AttributeError):
            currency.code = "CZK"
