"""
Request middleware for the convertor web app.
"""

import logging

from django.utils import timezone

logger = logging.getLogger(__name__)


class CurrentYearMiddleware:
    """Expose the current year as ``request.current_year`` on every request."""

    def __init__(self, get_response):
        self.get_response = get_response
        logger.debug("CurrentYearMiddleware initialized")

    def __call__(self, request):
        request.current_year = str(timezone.localdate().year)

        response = self.get_response(request)

        logger.debug(request.build_absolute_uri())
        return response
