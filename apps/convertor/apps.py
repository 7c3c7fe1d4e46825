from django.apps import AppConfig


class ConvertorConfig(AppConfig):
    name = "apps.convertor"
    label = "convertor"
    verbose_name = "Currency Convertor"
