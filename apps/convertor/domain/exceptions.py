"""
Domain exceptions for currency conversion.
"""


class ConvertorError(Exception):
    """Base class for every conversion failure."""


class InvalidArgumentError(ConvertorError, ValueError):
    """A required conversion argument is missing or malformed."""


class UnknownExchangeRateError(ConvertorError, LookupError):
    """
    The exchange rate for a currency pair is not known.

    Raised both when the rate table has no rate for the pair and when the
    rate table itself failed. The latter keeps the original fault as
    ``__cause__``.
    """

    UNKNOWN_CURRENCY = "The currency is unknown."
    RATE_NOT_RETRIEVED = "The exchange rate couldn't be retrieved."


class ExternalServiceFailureError(Exception):
    """A rate table could not reach or understand its backing service."""
