import requests
import logging
from dataclasses import dataclass, field
from typing import Optional
from django.conf import settings
from apps.districts.catalog import district_name
from .sample_data import sample_kpis, sample_timeseries

logger = logging.getLogger(__name__)

SOURCE_API = 'api'
SOURCE_SAMPLE = 'sample'


@dataclass
class FetchResult:
    """Outcome of a district fetch: live payload or the built-in sample"""
    kpis: Optional[dict] = None
    timeseries: list = field(default_factory=list)
    source: str = SOURCE_API
    error: Optional[str] = None

    @property
    def is_fallback(self):
        return self.source == SOURCE_SAMPLE


class DistrictDataService:
    """Service to fetch district MGNREGA data from the dashboard API"""

    @staticmethod
    def build_url(district_code):
        base_url = settings.MGNREGA_API_URL
        if not base_url:
            return None
        return f"{base_url.rstrip('/')}/api/data/{district_code}"

    @staticmethod
    def fetch_district_data(district_code):
        """Fetch KPIs and monthly series for a district, falling back to sample data"""
        url = DistrictDataService.build_url(district_code)

        if not url:
            logger.warning("MGNREGA_API_URL is not set, using sample data")
            return DistrictDataService.sample_fallback(district_code, 'API URL not configured')

        try:
            logger.info(f"Fetching district data: {url}")
            response = requests.get(url, timeout=settings.MGNREGA_API_TIMEOUT)
            response.raise_for_status()

            data = response.json()

        except requests.RequestException as e:
            logger.warning(f"API fetch failed for district {district_code}: {e}")
            return DistrictDataService.sample_fallback(district_code, str(e))
        except ValueError as e:
            logger.warning(f"Invalid JSON from API for district {district_code}: {e}")
            return DistrictDataService.sample_fallback(district_code, 'invalid JSON response')

        if not isinstance(data, dict):
            logger.warning(f"Unexpected payload type for district {district_code}: {type(data).__name__}")
            return DistrictDataService.sample_fallback(district_code, 'unexpected response shape')

        timeseries = data.get('timeseries') or []
        if not isinstance(timeseries, list):
            timeseries = []

        kpis = data.get('kpis')
        if kpis is not None and not isinstance(kpis, dict):
            logger.warning(f"Ignoring non-object kpis for district {district_code}: {type(kpis).__name__}")
            kpis = None

        logger.info(f"API fetch successful for district {district_code}: {len(timeseries)} months")
        return FetchResult(
            kpis=kpis,
            timeseries=timeseries,
            source=SOURCE_API,
        )

    @staticmethod
    def sample_fallback(district_code, error):
        """Fixed sample snapshot so the dashboard stays populated"""
        return FetchResult(
            kpis=sample_kpis(district_name(district_code)),
            timeseries=sample_timeseries(),
            source=SOURCE_SAMPLE,
            error=error,
        )
