import copy
import math

from .sample_data import SAMPLE_TIMESERIES

# Financial-year month order, April to March
MONTHS = ('Apr', 'May', 'Jun', 'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec', 'Jan', 'Feb', 'Mar')

DEFAULT_FACTOR = 10


def _shift_year(series, persondays, expenditure):
    return [
        dict(point, persondays=point['persondays'] + persondays, expenditure=point['expenditure'] + expenditure)
        for point in series
    ]


# State-level series per financial year. Placeholder figures until the API
# exposes a state endpoint.
STATE_YEAR_DATA = {
    '2023-24': [dict(point) for point in SAMPLE_TIMESERIES],
    '2024-25': _shift_year(SAMPLE_TIMESERIES, persondays=5000, expenditure=1000),
}

YEARS = tuple(STATE_YEAR_DATA)


def _month_value(series, month, key):
    for point in series or ():
        if point.get('month') == month:
            return point.get(key) or 0
    return 0


def combine_years(data, selected_years, months=MONTHS):
    """
    One row per month with each selected year's expenditure as a column.

    Missing years or months contribute 0, so every row carries every
    selected year.
    """
    rows = []
    for month in months:
        row = {'month': month}
        for year in selected_years:
            row[year] = _month_value(data.get(year), month, 'expenditure')
        rows.append(row)
    return rows


def household_totals(data, selected_years):
    """Total households worked per selected year"""
    return [
        {
            'year': year,
            'Total_Households_Worked': sum(point.get('households') or 0 for point in data.get(year) or ()),
        }
        for year in selected_years
    ]


def district_factor(code):
    """Deterministic scale (8-12) derived from the last digit of a district code"""
    code = str(code or '').strip()
    if not code or not code[-1].isdigit():
        return DEFAULT_FACTOR
    return (int(code[-1]) % 5) + 8


def _round_half_up(value):
    return int(math.floor(value + 0.5))


def mock_district_series(code, base=SAMPLE_TIMESERIES):
    """
    Scale the base series by the district factor.

    Stand-in for per-district history: persondays and expenditure are
    multiplied by factor / 10 and rounded, other fields are copied.
    """
    factor = district_factor(code)
    series = []
    for point in copy.deepcopy(list(base)):
        point['persondays'] = _round_half_up(point['persondays'] * factor / 10)
        point['expenditure'] = _round_half_up(point['expenditure'] * factor / 10)
        series.append(point)
    return series
