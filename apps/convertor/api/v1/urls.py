from django.urls import path, include
from rest_framework.routers import DefaultRouter

from apps.convertor.api.v1.views import ConversionViewSet

router = DefaultRouter()
router.register(r'conversions', ConversionViewSet, basename='conversion')

urlpatterns = [
    path('', include(router.urls)),
]
