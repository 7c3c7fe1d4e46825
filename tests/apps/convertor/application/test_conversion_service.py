import pytest
from decimal import Decimal
from unittest.mock import MagicMock

from apps.convertor.application.dto import ConversionRequestDTO, ConversionResultDTO
from apps.convertor.application.services import ConversionService
from apps.convertor.domain.exceptions import InvalidArgumentError, UnknownExchangeRateError
from apps.convertor.domain.models import Currency
from apps.convertor.domain.services import CurrencyConvertor
from apps.convertor.infrastructure.rate_tables.fixed import FixedExchangeRateTable


@pytest.fixture
def fixed_rates(settings):
    settings.EXCHANGE_RATE_TABLE = "fixed"
    settings.FIXED_EXCHANGE_RATES = {"EUR/CZK": "26.25"}
    settings.FIXED_EXCHANGE_RATES_DERIVE_INVERSE = True
    settings.CURRENCY_CONVERTOR_PRECISION = 28


class TestConversionService:
    """Tests for ConversionService application service."""

    def test_from_settings(self, fixed_rates, settings, mocker):
        """
        Test that from_settings wires the configured table and precision.
        """
        settings.CURRENCY_CONVERTOR_PRECISION = 34
        mock_convertor_class = mocker.patch("apps.convertor.application.services.CurrencyConvertor")

        service = ConversionService.from_settings()

        assert service.convertor is mock_convertor_class.return_value
        table = mock_convertor_class.call_args[0][0]
        assert isinstance(table, FixedExchangeRateTable)
        assert mock_convertor_class.call_args[1] == {"precision": 34}

    @pytest.mark.parametrize(
        "source, target, amount, expected",
        [
            ("EUR", "CZK", "1", "26.25"),
            ("CZK", "EUR", "1", "0.04"),
            ("CZK", "EUR", "67.85625", "2.58"),
            ("CZK", "EUR", "90.69375", "3.46"),
            ("EUR", "EUR", "0", "0.00"),
        ],
    )
    def test_convert_with_fixed_rates(self, fixed_rates, source, target, amount, expected):
        """
        Test reference conversions against the fixed EUR/CZK table.
        """
        service = ConversionService.from_settings()

        result = service.convert(ConversionRequestDTO(source, target, Decimal(amount)))

        assert result == ConversionResultDTO(source, target, Decimal(amount), Decimal(expected))
        assert str(result.converted_amount) == expected

    def test_convert_passes_currencies_to_convertor(self):
        """
        Test that codes are wrapped into Currency objects.
        """
        convertor = MagicMock(spec=CurrencyConvertor)
        convertor.convert.return_value = Decimal("5.00")
        service = ConversionService(convertor)

        result = service.convert(ConversionRequestDTO("USD", "EUR", Decimal("10")))

        convertor.convert.assert_called_once_with(Currency("USD"), Currency("EUR"), Decimal("10"))
        assert result.converted_amount == Decimal("5.00")

    def test_convert_unknown_rate_propagates(self, fixed_rates):
        """
        Test that domain errors reach the caller unchanged.
        """
        service = ConversionService.from_settings()

        with pytest.raises(UnknownExchangeRateError):
            service.convert(ConversionRequestDTO("EUR", "USD", Decimal("1")))

    def test_convert_empty_currency_code(self, fixed_rates):
        """
        Test that an empty code is rejected as an invalid argument.
        """
        service = ConversionService.from_settings()

        with pytest.raises(InvalidArgumentError):
            service.convert(ConversionRequestDTO("", "CZK", Decimal("1")))
