import logging
from dataclasses import dataclass
from typing import Optional

import requests
from django.conf import settings

from .catalog import DISTRICTS, match_district

logger = logging.getLogger(__name__)

LOCALITY_FIELDS = ('locality', 'city', 'principalSubdivision')


@dataclass(frozen=True)
class GeocodeResult:
    locality: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self):
        return self.error is None


class ReverseGeocoder:
    """Client for the third-party reverse-geocoding service"""

    @staticmethod
    def extract_locality(payload):
        """Pick the most specific place name the service returned"""
        if not isinstance(payload, dict):
            return None

        for field in LOCALITY_FIELDS:
            value = payload.get(field)
            if value:
                return str(value).strip() or None

        return None

    @staticmethod
    def reverse_geocode(latitude, longitude):
        """Resolve coordinates to a locality string"""
        params = {
            'latitude': latitude,
            'longitude': longitude,
            'localityLanguage': 'en',
        }

        try:
            logger.info(f"Reverse geocoding {latitude}, {longitude}")
            response = requests.get(
                settings.REVERSE_GEOCODE_URL,
                params=params,
                timeout=settings.REVERSE_GEOCODE_TIMEOUT,
            )
            response.raise_for_status()
            payload = response.json()

        except requests.RequestException as e:
            logger.warning(f"Reverse geocoding request failed: {e}")
            return GeocodeResult(error=str(e))
        except ValueError as e:
            logger.warning(f"Reverse geocoding returned invalid JSON: {e}")
            return GeocodeResult(error='invalid response')

        return GeocodeResult(locality=ReverseGeocoder.extract_locality(payload))


def detect_district(latitude, longitude, districts=DISTRICTS):
    """
    Coordinates -> (district or None, GeocodeResult).

    A successful geocode with no usable locality, or a locality that matches
    nothing, yields (None, result) with result.ok True.
    """
    result = ReverseGeocoder.reverse_geocode(latitude, longitude)

    if not result.ok:
        return None, result

    district = match_district(result.locality, districts)

    if district:
        logger.info(f"Locality '{result.locality}' matched {district}")
    else:
        logger.info(f"Locality '{result.locality}' matched no district")

    return district, result
