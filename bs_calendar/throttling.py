"""
Per-IP rate limits for the calendar API
"""
import logging
from functools import wraps

from django.conf import settings
from django_ratelimit.core import is_ratelimited

from .exceptions import AppError

logger = logging.getLogger(__name__)


def rate_limit(group, rate_setting, message):
    """
    Reject requests over the rate named by ``rate_setting`` with a 429.

    The rate is read from settings on every request, e.g. ``'30/m'`` or ``'100/15m'``.
    """
    def decorator(view_func):
        @wraps(view_func)
        def _wrapped_view(request, *args, **kwargs):
            limited = is_ratelimited(
                request,
                group=group,
                key='ip',
                rate=getattr(settings, rate_setting),
                increment=True,
            )
            if limited:
                logger.warning("Rate limit '%s' hit by %s", group, request.META.get('REMOTE_ADDR'))
                raise AppError(message, 429)
            return view_func(request, *args, **kwargs)
        return _wrapped_view
    return decorator


api_limit = rate_limit(
    'bs_calendar.api',
    'API_RATE_LIMIT',
    'Too many requests from this IP, please try again after 15 minutes',
)

conversion_limit = rate_limit(
    'bs_calendar.conversion',
    'CONVERSION_RATE_LIMIT',
    'Too many conversion requests, please slow down',
)
