"""
Data Transfer Objects for the application layer.
DTOs decouple the domain convertor from external API contracts.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ConversionRequestDTO:
    """Request DTO for currency conversion."""
    source_currency: str
    target_currency: str
    amount: Decimal


@dataclass(frozen=True)
class ConversionResultDTO:
    """Result DTO for currency conversion."""
    source_currency: str
    target_currency: str
    amount: Decimal
    converted_amount: Decimal
