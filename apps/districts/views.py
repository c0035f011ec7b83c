from django.contrib import messages
from django.shortcuts import redirect
from django.urls import reverse
from django.utils.http import urlencode
from apps.core.context import UIContext
from .services import detect_district as resolve_district
import logging

logger = logging.getLogger(__name__)

GEOLOCATION_ERRORS = {
    'unsupported': 'notice_geo_unsupported',
    'denied': 'notice_geo_denied',
}


def _parse_coordinate(value, limit):
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not -limit <= number <= limit:
        return None
    return number


def detect_district(request):
    """
    Resolve browser coordinates to a district and send the user to its dashboard.

    The page's geolocation script calls this with ?lat=&lon=, or with
    ?error=unsupported|denied when the browser could not provide a position.
    Every outcome ends on the dashboard; failures leave a notice.
    """
    ui = UIContext.from_request(request)
    labels = ui.labels
    dashboard_url = reverse('dashboard')

    error = request.GET.get('error')
    if error:
        logger.info(f"Browser geolocation unavailable: {error}")
        messages.warning(request, labels[GEOLOCATION_ERRORS.get(error, 'notice_geo_denied')])
        return redirect(dashboard_url)

    latitude = _parse_coordinate(request.GET.get('lat'), 90)
    longitude = _parse_coordinate(request.GET.get('lon'), 180)

    if latitude is None or longitude is None:
        logger.warning(f"Invalid coordinates: lat={request.GET.get('lat')!r} lon={request.GET.get('lon')!r}")
        messages.error(request, labels['notice_detect_failed'])
        return redirect(dashboard_url)

    district, result = resolve_district(latitude, longitude)

    if not result.ok:
        messages.error(request, labels['notice_detect_failed'])
        return redirect(dashboard_url)

    if district is None:
        messages.warning(request, labels['notice_detect_no_match'])
        return redirect(dashboard_url)

    messages.info(request, labels['notice_detect_success'].format(name=district.name))
    return redirect(f"{dashboard_url}?{urlencode({'district': district.code})}")
