"""
Centralized error handling for the calendar API
"""
import logging
import traceback

from django.conf import settings
from django.http import JsonResponse

from .exceptions import AppError, CalendarError

logger = logging.getLogger(__name__)


def error_response(message, status_code, stack=None):
    error = {
        'message': message,
        'statusCode': status_code,
    }
    if stack:
        error['stack'] = stack
    return JsonResponse({'success': False, 'error': error}, status=status_code)


class ApiErrorMiddleware:
    """Turn exceptions raised by views into the JSON error envelope"""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if isinstance(exception, (AppError, CalendarError)):
            return error_response(exception.message, exception.status_code)

        logger.exception("Unhandled error on %s %s", request.method, request.path)
        stack = traceback.format_exc() if settings.DEBUG else None
        return error_response('Internal Server Error', 500, stack)


def not_found(request, exception=None):
    """handler404: JSON instead of Django's HTML page"""
    return error_response(f"Route {request.get_full_path()} not found", 404)
