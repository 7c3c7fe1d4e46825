from decimal import Decimal, InvalidOperation

from django.core.exceptions import ImproperlyConfigured
from django.core.management.base import BaseCommand, CommandError

from apps.convertor.application.dto import ConversionRequestDTO
from apps.convertor.application.services import ConversionService
from apps.convertor.domain.exceptions import ConvertorError


class Command(BaseCommand):
    help = 'Convert an amount between two currencies using the configured rate table'

    def add_arguments(self, parser):
        parser.add_argument('source_currency', type=str, help='Source currency code (e.g. EUR)')
        parser.add_argument('target_currency', type=str, help='Target currency code (e.g. CZK)')
        parser.add_argument('amount', type=str, help='Amount to convert (e.g. 1 or 67.85625)')
        parser.add_argument(
            '--table',
            dest='table',
            type=str,
            default=None,
            help='Rate table name (defaults to settings.EXCHANGE_RATE_TABLE)'
        )

    def handle(self, **options):
        try:
            amount = Decimal(options['amount'])
        except InvalidOperation:
            raise CommandError(f"Invalid amount: {options['amount']!r}")

        if not amount.is_finite():
            raise CommandError(f"Invalid amount: {options['amount']!r}")

        try:
            service = ConversionService.from_settings(options['table'])
        except ImproperlyConfigured as e:
            raise CommandError(str(e))

        conversion_request = ConversionRequestDTO(
            source_currency=options['source_currency'].upper(),
            target_currency=options['target_currency'].upper(),
            amount=amount,
        )

        try:
            result = service.convert(conversion_request)
        except ConvertorError as e:
            raise CommandError(str(e))

        self.stdout.write(
            self.style.SUCCESS(
                f"{result.amount} {result.source_currency} = {result.converted_amount} {result.target_currency}"
            )
        )
