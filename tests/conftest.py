"""
Shared fixtures for the dashboard tests.

Outbound HTTP is never performed: tests patch ``requests.get`` and hand back
FakeResponse objects shaped like the pieces of ``requests.Response`` the
services use.
"""
import pytest
import requests


class FakeResponse:
    def __init__(self, payload=None, status_code=200, invalid_json=False):
        self.payload = payload
        self.status_code = status_code
        self.invalid_json = invalid_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        if self.invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def api_url(settings):
    settings.MGNREGA_API_URL = 'https://mgnrega.example.org'
    settings.MGNREGA_API_TIMEOUT = None
    return settings.MGNREGA_API_URL


@pytest.fixture
def geocode_url(settings):
    settings.REVERSE_GEOCODE_URL = 'https://geo.example.org/reverse'
    settings.REVERSE_GEOCODE_TIMEOUT = None
    return settings.REVERSE_GEOCODE_URL


@pytest.fixture
def live_payload():
    return {
        'kpis': {
            'district_name': 'PATNA',
            'Total_Individuals_Worked': 12600000,
            'Total_Exp': 250000,
            'Average_days_of_employment_provided_per_Household': 45,
        },
        'timeseries': [
            {'month': 'Apr', 'households': 1000, 'persondays': 5000, 'expenditure': 700},
            {'month': 'May', 'households': 1100, 'persondays': 5200, 'expenditure': 750},
        ],
    }
