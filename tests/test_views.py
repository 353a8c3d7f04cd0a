"""Tests for the calendar API endpoints."""

from datetime import date

import pytest
from django.utils import timezone

from bs_calendar import views


def assert_error(response, status_code, message):
    assert response.status_code == status_code
    assert response.json() == {
        'success': False,
        'error': {'message': message, 'statusCode': status_code},
    }


class TestIndex:

    def test_service_info(self, client):
        response = client.get('/')
        assert response.status_code == 200
        body = response.json()
        assert body['success'] is True
        assert body['version'] == '2.0.0'
        assert body['endpoints']['adToBs'] == '/api/convert/ad-to-bs?date=YYYY-MM-DD'


class TestToday:

    def test_today_in_nepal(self, client, monkeypatch):
        monkeypatch.setattr(timezone, 'localdate', lambda *args, **kwargs: date(2024, 4, 13))

        response = client.get('/api/today')
        assert response.status_code == 200
        assert response.json() == {
            'success': True,
            'data': {
                'ad': {
                    'year': 2024,
                    'month': 4,
                    'day': 13,
                    'weekday': 'Saturday',
                    'date': '2024-04-13',
                },
                'bs': {
                    'year': 2081,
                    'month': 1,
                    'monthName': 'Baishakh',
                    'day': 1,
                    'weekday': 'Saturday',
                },
            },
        }

    def test_today_mid_year(self, client, monkeypatch):
        monkeypatch.setattr(timezone, 'localdate', lambda *args, **kwargs: date(2026, 10, 19))

        bs = client.get('/api/today').json()['data']['bs']
        assert bs == {
            'year': 2083,
            'month': 7,
            'monthName': 'Kartik',
            'day': 2,
            'weekday': 'Monday',
        }

    def test_today_is_cached(self, client):
        assert client.get('/api/today')['X-Cache'] == 'MISS'
        assert client.get('/api/today')['X-Cache'] == 'HIT'


class TestADToBS:

    def test_converts(self, client):
        response = client.get('/api/convert/ad-to-bs', {'date': '2024-04-13'})
        assert response.status_code == 200
        assert response.json() == {
            'success': True,
            'data': {
                'ad': {'year': 2024, 'month': 4, 'day': 13, 'date': '2024-04-13'},
                'bs': {
                    'year': 2081,
                    'month': 1,
                    'monthName': 'Baishakh',
                    'day': 1,
                    'weekday': 'Saturday',
                },
            },
        }

    def test_second_request_is_served_from_cache(self, client):
        first = client.get('/api/convert/ad-to-bs', {'date': '2024-12-31'})
        second = client.get('/api/convert/ad-to-bs', {'date': '2024-12-31'})
        assert first['X-Cache'] == 'MISS'
        assert second['X-Cache'] == 'HIT'
        assert second.content == first.content

    def test_missing_date(self, client):
        response = client.get('/api/convert/ad-to-bs')
        assert_error(response, 400, "Date parameter is required (format: YYYY-MM-DD)")

    @pytest.mark.parametrize('value', [
        'abc',
        '2024-02-30',
        '13-04-2024',
        '2024-4-13',
        '+2024-04-13',
        '٢٠٢٤-04-13',
        '２０２４-04-13',
    ])
    def test_invalid_date(self, client, value):
        response = client.get('/api/convert/ad-to-bs', {'date': value})
        assert_error(response, 400, "Invalid date format. Use YYYY-MM-DD")

    def test_before_supported_range(self, client):
        response = client.get('/api/convert/ad-to-bs', {'date': '1943-04-13'})
        assert_error(response, 400, "Date is before supported range (2000 BS)")

    def test_after_supported_range(self, client):
        response = client.get('/api/convert/ad-to-bs', {'date': '2043-04-14'})
        assert_error(response, 400, "Date exceeds supported range (2100 BS)")

    def test_errors_are_not_cached(self, client):
        client.get('/api/convert/ad-to-bs', {'date': 'abc'})
        response = client.get('/api/convert/ad-to-bs', {'date': 'abc'})
        assert response.status_code == 400
        assert not response.has_header('X-Cache')


class TestBSToAD:

    def test_converts(self, client):
        response = client.get('/api/convert/bs-to-ad', {'year': 2081, 'month': 1, 'day': 1})
        assert response.status_code == 200
        assert response.json() == {
            'success': True,
            'data': {
                'bs': {'year': 2081, 'month': 1, 'day': 1},
                'ad': {
                    'year': 2024,
                    'month': 4,
                    'day': 13,
                    'weekday': 'Saturday',
                    'date': '2024-04-13',
                },
            },
        }

    def test_day_32_rolls_into_next_month(self, client):
        response = client.get('/api/convert/bs-to-ad', {'year': 2081, 'month': 1, 'day': 32})
        assert response.status_code == 200
        assert response.json()['data']['ad']['date'] == '2024-05-14'

    @pytest.mark.parametrize('params', [
        {},
        {'year': 2081, 'month': 1},
        {'year': '', 'month': 1, 'day': 1},
    ])
    def test_missing_params(self, client, params):
        response = client.get('/api/convert/bs-to-ad', params)
        assert_error(response, 400, "Year, Month, and Day parameters are required")

    @pytest.mark.parametrize('year', ['abc', '20_81', '+2081', '-1', '2081.0', '٢٠٨١', '२०८१'])
    def test_non_numeric_params(self, client, year):
        response = client.get('/api/convert/bs-to-ad', {'year': year, 'month': 1, 'day': 1})
        assert_error(response, 400, "Year, Month, and Day must be valid numbers")

    def test_surrounding_whitespace_is_ignored(self, client):
        response = client.get('/api/convert/bs-to-ad', {'year': ' 2081 ', 'month': '1', 'day': '1'})
        assert response.status_code == 200
        assert response.json()['data']['ad']['date'] == '2024-04-13'

    @pytest.mark.parametrize('month', [0, 13])
    def test_month_out_of_range(self, client, month):
        response = client.get('/api/convert/bs-to-ad', {'year': 2081, 'month': month, 'day': 1})
        assert_error(response, 400, "Month must be between 1 and 12")

    @pytest.mark.parametrize('day', [0, 33])
    def test_day_out_of_range(self, client, day):
        response = client.get('/api/convert/bs-to-ad', {'year': 2081, 'month': 1, 'day': day})
        assert_error(response, 400, "Day must be between 1 and 32")

    @pytest.mark.parametrize('year', [1999, 2100])
    def test_year_out_of_range(self, client, year):
        response = client.get('/api/convert/bs-to-ad', {'year': year, 'month': 1, 'day': 1})
        assert_error(response, 400, "Year out of supported range (2000-2099 BS)")


class TestCalendarMonth:

    def test_month_grid(self, client):
        response = client.get('/api/calendar/bs', {'year': 2081, 'month': 1})
        assert response.status_code == 200
        assert response.json() == {
            'success': True,
            'data': {
                'year': 2081,
                'month': 1,
                'monthName': 'Baishakh',
                'daysInMonth': 31,
                'startWeekdayIndex': 6,
            },
        }

    def test_missing_params(self, client):
        response = client.get('/api/calendar/bs', {'year': 2081})
        assert_error(response, 400, "Year and Month parameters are required")

    @pytest.mark.parametrize('month', ['one', '+1', '0_1', '١'])
    def test_non_numeric_params(self, client, month):
        response = client.get('/api/calendar/bs', {'year': 2081, 'month': month})
        assert_error(response, 400, "Year and Month must be valid numbers")

    def test_month_out_of_range(self, client):
        response = client.get('/api/calendar/bs', {'year': 2081, 'month': 13})
        assert_error(response, 400, "Month must be between 1 and 12")

    def test_year_out_of_range(self, client):
        response = client.get('/api/calendar/bs', {'year': 1999, 'month': 1})
        assert_error(response, 400, "Year out of supported range (2000-2099 BS)")


class TestErrors:

    def test_unknown_route(self, client):
        response = client.get('/api/does-not-exist')
        assert_error(response, 404, "Route /api/does-not-exist not found")

    @pytest.mark.parametrize('path', ['/api/does-not-exist', '/nope', '/api/today/'])
    def test_unknown_route_with_debug_on(self, client, settings, path):
        settings.DEBUG = True
        response = client.get(path, {'x': '1'})
        assert_error(response, 404, f"Route {path}?x=1 not found")

    def test_post_not_allowed(self, client):
        response = client.post('/api/convert/ad-to-bs', {'date': '2024-04-13'})
        assert_error(response, 405, "Method POST not allowed")

    def test_unexpected_error(self, client, monkeypatch):
        def broken(year, month):
            raise RuntimeError("boom")

        monkeypatch.setattr(views, 'month_grid', broken)
        response = client.get('/api/calendar/bs', {'year': 2081, 'month': 1})
        assert_error(response, 500, "Internal Server Error")

    def test_cors_allows_any_origin(self, client):
        response = client.get('/api/calendar/bs', {'year': 2081, 'month': 1}, HTTP_ORIGIN='https://example.com')
        assert response['Access-Control-Allow-Origin'] == '*'
