"""
Response caching for the calendar API views
"""
import json
from datetime import datetime, time, timedelta
from functools import wraps

from django.conf import settings
from django.core.cache import cache
from django.http import HttpResponse
from django.utils import timezone


def make_cache_key(path, params):
    """Generate cache key from request path and query parameters"""
    return f"bs_calendar:{path}:{json.dumps(dict(params), sort_keys=True)}"


def seconds_until_midnight():
    """Seconds left until the next local midnight (Nepal time by default)"""
    now = timezone.localtime()
    midnight = datetime.combine(now.date() + timedelta(days=1), time.min, tzinfo=now.tzinfo)
    return max(int((midnight - now).total_seconds()), 1)


def cache_response(timeout=None):
    """
    Cache successful GET responses keyed by path and query string.

    Args:
        timeout: seconds, a callable returning seconds, or None for settings.CACHE_TTL

    Adds an ``X-Cache`` header of HIT or MISS.
    """
    def decorator(view_func):
        @wraps(view_func)
        def _wrapped_view(request, *args, **kwargs):
            if request.method != 'GET':
                return view_func(request, *args, **kwargs)

            cache_key = make_cache_key(request.path, request.GET.items())
            cached_body = cache.get(cache_key)
            if cached_body is not None:
                response = HttpResponse(cached_body, content_type='application/json')
                response['X-Cache'] = 'HIT'
                return response

            response = view_func(request, *args, **kwargs)

            if response.status_code == 200:
                if timeout is None:
                    ttl = settings.CACHE_TTL
                elif callable(timeout):
                    ttl = timeout()
                else:
                    ttl = timeout
                cache.set(cache_key, response.content, ttl)
                response['X-Cache'] = 'MISS'

            return response
        return _wrapped_view
    return decorator
