"""
Serializers for the convertor API.
Handles validation of conversion query parameters.
"""

from decimal import Decimal

from rest_framework import serializers


class ConversionRequestSerializer(serializers.Serializer):
    source_currency = serializers.CharField(min_length=3, max_length=3)
    target_currency = serializers.CharField(min_length=3, max_length=3)
    amount = serializers.DecimalField(
        max_digits=None,
        decimal_places=None,
        min_value=Decimal("0"),
    )

    def validate_source_currency(self, value: str) -> str:
        return value.upper()

    def validate_target_currency(self, value: str) -> str:
        return value.upper()
