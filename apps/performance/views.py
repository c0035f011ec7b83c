from django.contrib import messages
from django.shortcuts import render
from apps.core.context import UIContext
from apps.districts.catalog import DISTRICTS, get_district
from .comparison import (
    MONTHS,
    STATE_YEAR_DATA,
    YEARS,
    combine_years,
    household_totals,
    mock_district_series,
)
from .services import DistrictDataService
import logging

logger = logging.getLogger(__name__)


def _kpi_cards(kpis, labels):
    if not kpis:
        return []
    return [
        {
            'title': labels['kpi_individuals'],
            'value': kpis.get('Total_Individuals_Worked'),
            'hint': labels['kpi_individuals_hint'],
            'status': 'good',
            'compact': True,
        },
        {
            'title': labels['kpi_expenditure'],
            'value': kpis.get('Total_Exp'),
            'hint': labels['kpi_expenditure_hint'],
            'status': 'warn',
            'compact': True,
            'prefix': '₹ ',
        },
        {
            'title': labels['kpi_avg_days'],
            'value': kpis.get('Average_days_of_employment_provided_per_Household'),
            'hint': labels['kpi_avg_days_hint'],
            'status': 'good',
            'compact': False,
        },
    ]


def dashboard(request):
    """District performance: KPIs and monthly charts for the selected district"""
    ui = UIContext.from_request(request)
    labels = ui.labels

    kpis = None
    timeseries = []
    result = None

    if ui.district:
        result = DistrictDataService.fetch_district_data(ui.district)

        if result.is_fallback:
            messages.warning(request, labels['notice_fetch_failed'])

        kpis = result.kpis
        timeseries = result.timeseries

    context = ui.template_context(
        districts=DISTRICTS,
        selected_district=get_district(ui.district),
        kpis=kpis,
        kpi_cards=_kpi_cards(kpis, labels),
        timeseries=timeseries,
        result=result,
    )
    return render(request, 'performance/dashboard.html', context)


def _selected_years(request):
    # No year parameter at all means the default (every year); an explicit
    # empty selection is honoured.
    if 'year' not in request.GET:
        return list(YEARS)
    requested = request.GET.getlist('year')
    return [year for year in YEARS if year in requested]


def state_comparison(request):
    """Year-over-year expenditure and household totals at state level"""
    ui = UIContext.from_request(request)
    selected_years = _selected_years(request)

    context = ui.template_context(
        years=YEARS,
        selected_years=selected_years,
        months=MONTHS,
        combined_rows=combine_years(STATE_YEAR_DATA, selected_years),
        household_rows=household_totals(STATE_YEAR_DATA, selected_years),
    )
    return render(request, 'performance/state_comparison.html', context)


def _series_summary(code):
    series = mock_district_series(code)
    return {
        'code': code,
        'district': get_district(code),
        'series': series,
        'total_persondays': sum(point['persondays'] for point in series),
        'total_expenditure': sum(point['expenditure'] for point in series),
    }


def compare(request):
    """Side-by-side persondays for two districts"""
    ui = UIContext.from_request(request, district_param='d1')
    first = ui.district
    second = request.GET.get('d2', '').strip()

    context = ui.template_context(
        districts=DISTRICTS,
        first=_series_summary(first),
        second=_series_summary(second),
    )
    return render(request, 'performance/compare.html', context)
