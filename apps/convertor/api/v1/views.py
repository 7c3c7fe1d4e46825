"""
ViewSets for the convertor API v1.
"""

import logging

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.convertor.api.v1.serializers import ConversionRequestSerializer
from apps.convertor.application.dto import ConversionRequestDTO
from apps.convertor.application.services import ConversionService
from apps.convertor.domain.exceptions import InvalidArgumentError, UnknownExchangeRateError

logger = logging.getLogger(__name__)


@extend_schema(tags=['Conversions'])
class ConversionViewSet(viewsets.ViewSet):

    @extend_schema(
        parameters=[
            OpenApiParameter("source_currency", OpenApiTypes.STR, required=True, description="Source currency code (e.g. EUR)"),
            OpenApiParameter("target_currency", OpenApiTypes.STR, required=True, description="Target currency code (e.g. CZK)"),
            OpenApiParameter("amount", OpenApiTypes.DECIMAL, required=True, description="Amount to convert"),
        ],
        responses={200: OpenApiTypes.OBJECT},
        description="Convert amount from one currency to another, rounded half-even to two decimal places"
    )
    @action(detail=False, methods=['get'], url_path='convert')
    def convert(self, request):
        """
        Convert an amount from one currency to another.
        """
        serializer = ConversionRequestSerializer(data=request.query_params)
        if not serializer.is_valid():
            return Response(
                {"error": "Invalid conversion request", "details": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST
            )

        conversion_request = ConversionRequestDTO(**serializer.validated_data)

        try:
            result = ConversionService.from_settings().convert(conversion_request)
        except InvalidArgumentError as e:
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except UnknownExchangeRateError as e:
            logger.info(
                "Conversion %s/%s failed: %s",
                conversion_request.source_currency,
                conversion_request.target_currency,
                e
            )
            return Response({"error": str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response({
            "source_currency": result.source_currency,
            "target_currency": result.target_currency,
            "amount": str(result.amount),
            "converted_amount": str(result.converted_amount),
        })
