"""
Tests for the remote-data services:
    apps/performance/services.py : district fetch with sample fallback
    apps/districts/services.py   : reverse geocoding + district detection

requests.get is patched in every test; no real network access.
"""
from unittest.mock import patch

import pytest
import requests

from apps.districts.services import GeocodeResult, ReverseGeocoder, detect_district
from apps.performance.sample_data import SAMPLE_KPIS, SAMPLE_TIMESERIES
from apps.performance.services import (
    SOURCE_API,
    SOURCE_SAMPLE,
    DistrictDataService,
    FetchResult,
)


def _expected_sample_kpis(name):
    expected = {'district_name': name}
    expected.update(SAMPLE_KPIS)
    return expected


# ── DistrictDataService: success ──────────────────────────────────────────────

def test_fetch_success_returns_payload(api_url, fake_response, live_payload):
    with patch('apps.performance.services.requests.get', return_value=fake_response(live_payload)) as mock_get:
        result = DistrictDataService.fetch_district_data('0501')

    mock_get.assert_called_once_with(f'{api_url}/api/data/0501', timeout=None)
    assert result.source == SOURCE_API
    assert not result.is_fallback
    assert result.error is None
    assert result.kpis == live_payload['kpis']
    assert result.timeseries == live_payload['timeseries']


def test_fetch_success_without_timeseries(api_url, fake_response):
    payload = {'kpis': {'Total_Exp': 10}}
    with patch('apps.performance.services.requests.get', return_value=fake_response(payload)):
        result = DistrictDataService.fetch_district_data('0502')

    assert result.source == SOURCE_API
    assert result.timeseries == []


def test_fetch_non_list_timeseries_becomes_empty(api_url, fake_response):
    payload = {'kpis': {'Total_Exp': 10}, 'timeseries': 'x'}
    with patch('apps.performance.services.requests.get', return_value=fake_response(payload)):
        result = DistrictDataService.fetch_district_data('0502')

    assert not result.is_fallback
    assert result.kpis == {'Total_Exp': 10}
    assert result.timeseries == []


def test_fetch_non_object_kpis_dropped(api_url, fake_response):
    payload = {'kpis': ['unexpected'], 'timeseries': []}
    with patch('apps.performance.services.requests.get', return_value=fake_response(payload)):
        result = DistrictDataService.fetch_district_data('0501')

    assert result.source == SOURCE_API
    assert result.kpis is None
    assert result.timeseries == []


def test_fetch_uses_configured_timeout(settings, api_url, fake_response, live_payload):
    settings.MGNREGA_API_TIMEOUT = 5.0
    with patch('apps.performance.services.requests.get', return_value=fake_response(live_payload)) as mock_get:
        DistrictDataService.fetch_district_data('0501')

    assert mock_get.call_args.kwargs['timeout'] == 5.0


def test_build_url_strips_trailing_slash(settings):
    settings.MGNREGA_API_URL = 'https://mgnrega.example.org/'
    assert DistrictDataService.build_url('0544') == 'https://mgnrega.example.org/api/data/0544'


# ── DistrictDataService: fallback ─────────────────────────────────────────────

@pytest.mark.parametrize('failure', [
    requests.ConnectionError('connection refused'),
    requests.Timeout('read timed out'),
])
def test_fetch_network_failure_falls_back_to_sample(api_url, failure):
    with patch('apps.performance.services.requests.get', side_effect=failure):
        result = DistrictDataService.fetch_district_data('0501')

    assert result.is_fallback
    assert result.source == SOURCE_SAMPLE
    assert result.error
    assert result.kpis == _expected_sample_kpis('PATNA')
    assert result.timeseries == list(SAMPLE_TIMESERIES)


def test_fetch_invalid_json_falls_back(api_url, fake_response):
    with patch('apps.performance.services.requests.get', return_value=fake_response(invalid_json=True)):
        result = DistrictDataService.fetch_district_data('0518')

    assert result.is_fallback
    assert result.kpis == _expected_sample_kpis('SAMASTIPUR')
    assert result.timeseries == list(SAMPLE_TIMESERIES)


def test_fetch_http_error_falls_back(api_url, fake_response):
    with patch('apps.performance.services.requests.get', return_value=fake_response({'detail': 'boom'}, status_code=500)):
        result = DistrictDataService.fetch_district_data('0501')

    assert result.is_fallback


def test_fetch_non_object_json_falls_back(api_url, fake_response):
    with patch('apps.performance.services.requests.get', return_value=fake_response(['not', 'a', 'dict'])):
        result = DistrictDataService.fetch_district_data('0501')

    assert result.is_fallback


def test_fetch_unknown_district_fallback_name(api_url):
    with patch('apps.performance.services.requests.get', side_effect=requests.ConnectionError()):
        result = DistrictDataService.fetch_district_data('9999')

    assert result.kpis['district_name'] == 'Unknown'


def test_fetch_without_base_url_skips_network(settings):
    settings.MGNREGA_API_URL = ''
    with patch('apps.performance.services.requests.get') as mock_get:
        result = DistrictDataService.fetch_district_data('0501')

    mock_get.assert_not_called()
    assert result.is_fallback
    assert result.kpis == _expected_sample_kpis('PATNA')


def test_fallback_series_is_a_fresh_copy(api_url):
    with patch('apps.performance.services.requests.get', side_effect=requests.ConnectionError()):
        first = DistrictDataService.fetch_district_data('0501')
        first.timeseries[0]['persondays'] = -1
        second = DistrictDataService.fetch_district_data('0501')

    assert second.timeseries[0]['persondays'] == 300000
    assert SAMPLE_TIMESERIES[0]['persondays'] == 300000


def test_each_fetch_is_independent(api_url, fake_response, live_payload):
    with patch('apps.performance.services.requests.get', return_value=fake_response(live_payload)) as mock_get:
        DistrictDataService.fetch_district_data('0501')
        DistrictDataService.fetch_district_data('0501')

    assert mock_get.call_count == 2


def test_fetch_result_defaults():
    result = FetchResult()
    assert result.timeseries == []
    assert not result.is_fallback


# ── ReverseGeocoder ───────────────────────────────────────────────────────────

@pytest.mark.parametrize('payload,expected', [
    ({'locality': 'Patna', 'city': 'Other', 'principalSubdivision': 'Bihar'}, 'Patna'),
    ({'locality': '', 'city': 'Nalanda', 'principalSubdivision': 'Bihar'}, 'Nalanda'),
    ({'principalSubdivision': 'Bihar'}, 'Bihar'),
    ({}, None),
    (None, None),
])
def test_extract_locality(payload, expected):
    assert ReverseGeocoder.extract_locality(payload) == expected


def test_reverse_geocode_request_params(geocode_url, fake_response):
    with patch('apps.districts.services.requests.get', return_value=fake_response({'locality': 'Patna'})) as mock_get:
        result = ReverseGeocoder.reverse_geocode(25.59, 85.13)

    mock_get.assert_called_once_with(
        geocode_url,
        params={'latitude': 25.59, 'longitude': 85.13, 'localityLanguage': 'en'},
        timeout=None,
    )
    assert result == GeocodeResult(locality='Patna')
    assert result.ok


def test_reverse_geocode_network_error(geocode_url):
    with patch('apps.districts.services.requests.get', side_effect=requests.ConnectionError('offline')):
        result = ReverseGeocoder.reverse_geocode(25.59, 85.13)

    assert not result.ok
    assert result.locality is None


def test_reverse_geocode_invalid_json(geocode_url, fake_response):
    with patch('apps.districts.services.requests.get', return_value=fake_response(invalid_json=True)):
        result = ReverseGeocoder.reverse_geocode(25.59, 85.13)

    assert not result.ok


# ── detect_district ───────────────────────────────────────────────────────────

def test_detect_district_match(geocode_url, fake_response):
    with patch('apps.districts.services.requests.get', return_value=fake_response({'locality': 'PATNA DIVISION'})):
        district, result = detect_district(25.59, 85.13)

    assert result.ok
    assert district.code == '0501'


def test_detect_district_no_match(geocode_url, fake_response):
    with patch('apps.districts.services.requests.get', return_value=fake_response({'locality': 'UNKNOWNPLACE'})):
        district, result = detect_district(10.0, 10.0)

    assert result.ok
    assert district is None


def test_detect_district_failure(geocode_url):
    with patch('apps.districts.services.requests.get', side_effect=requests.Timeout()):
        district, result = detect_district(25.59, 85.13)

    assert district is None
    assert not result.ok
