import logging
import re
from datetime import datetime
from functools import wraps

from django.http import JsonResponse
from django.utils import timezone

from . import __version__
from .caching import cache_response, seconds_until_midnight
from .exceptions import AppError
from .throttling import api_limit, conversion_limit
from .utils import ADDate, bs_to_ad, date_to_bs, month_grid

logger = logging.getLogger(__name__)

# Plain ASCII digits; int() and strptime() also accept "+5", "20_81" and non-ASCII digits
INTEGER_PARAM = re.compile(r"[0-9]+")
DATE_PARAM = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def api_view(view_func):
    """GET only, and counted against the general API rate limit"""
    @api_limit
    @wraps(view_func)
    def _wrapped_view(request, *args, **kwargs):
        if request.method != 'GET':
            raise AppError(f"Method {request.method} not allowed", 405)
        return view_func(request, *args, **kwargs)
    return _wrapped_view


def _parse_int_params(request, names, required_message, number_message):
    values = [request.GET.get(name, '').strip() for name in names]
    if not all(values):
        raise AppError(required_message, 400)
    if not all(INTEGER_PARAM.fullmatch(value) for value in values):
        raise AppError(number_message, 400)
    return [int(value) for value in values]


def index(request):
    return JsonResponse({
        'success': True,
        'message': 'Nepali Calendar API is running',
        'version': __version__,
        'endpoints': {
            'today': '/api/today',
            'adToBs': '/api/convert/ad-to-bs?date=YYYY-MM-DD',
            'bsToAd': '/api/convert/bs-to-ad?year=YYYY&month=MM&day=DD',
            'calendar': '/api/calendar/bs?year=YYYY&month=MM',
        },
    })


@api_view
@cache_response(timeout=seconds_until_midnight)
def today(request):
    """Today's date in Nepal, in both AD and BS"""
    today_ad = ADDate.from_date(timezone.localdate())
    bs_date = date_to_bs(today_ad.date)

    return JsonResponse({
        'success': True,
        'data': {
            'ad': today_ad.as_dict(),
            'bs': bs_date.as_dict(),
        },
    })


@api_view
@cache_response()
@conversion_limit
def convert_ad_to_bs(request):
    """GET /api/convert/ad-to-bs?date=YYYY-MM-DD"""
    date_param = request.GET.get('date')

    if not date_param:
        raise AppError("Date parameter is required (format: YYYY-MM-DD)", 400)

    invalid_format = AppError("Invalid date format. Use YYYY-MM-DD", 400)
    if not DATE_PARAM.fullmatch(date_param):
        raise invalid_format

    try:
        ad_date = datetime.strptime(date_param, '%Y-%m-%d').date()
    except ValueError:
        raise invalid_format from None

    bs_date = date_to_bs(ad_date)
    logger.debug("Converted %s AD to %s BS", ad_date, bs_date)

    return JsonResponse({
        'success': True,
        'data': {
            'ad': {
                'year': ad_date.year,
                'month': ad_date.month,
                'day': ad_date.day,
                'date': date_param,
            },
            'bs': bs_date.as_dict(),
        },
    })


@api_view
@cache_response()
@conversion_limit
def convert_bs_to_ad(request):
    """GET /api/convert/bs-to-ad?year=YYYY&month=MM&day=DD"""
    year, month, day = _parse_int_params(
        request,
        ('year', 'month', 'day'),
        "Year, Month, and Day parameters are required",
        "Year, Month, and Day must be valid numbers",
    )

    if month < 1 or month > 12:
        raise AppError("Month must be between 1 and 12", 400)

    # Up to 32 is accepted for every month; days past the month's end roll into the next month
    if day < 1 or day > 32:
        raise AppError("Day must be between 1 and 32", 400)

    ad_date = bs_to_ad(year, month, day)
    logger.debug("Converted %s-%s-%s BS to %s AD", year, month, day, ad_date)

    return JsonResponse({
        'success': True,
        'data': {
            'bs': {
                'year': year,
                'month': month,
                'day': day,
            },
            'ad': ad_date.as_dict(),
        },
    })


@api_view
@cache_response()
def calendar_month(request):
    """GET /api/calendar/bs?year=YYYY&month=MM"""
    year, month = _parse_int_params(
        request,
        ('year', 'month'),
        "Year and Month parameters are required",
        "Year and Month must be valid numbers",
    )

    if month < 1 or month > 12:
        raise AppError("Month must be between 1 and 12", 400)

    grid = month_grid(year, month)

    return JsonResponse({
        'success': True,
        'data': grid.as_dict(),
    })
