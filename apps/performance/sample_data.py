"""
Built-in MGNREGA sample figures.

Shown whenever the live endpoint cannot be reached, and used as the base
series for the comparison pages until per-district data is available.
"""
import copy

# Monthly series for one district, in financial-year order
SAMPLE_TIMESERIES = (
    {'month': 'Apr', 'households': 90000, 'persondays': 300000, 'expenditure': 12000},
    {'month': 'May', 'households': 92000, 'persondays': 320000, 'expenditure': 13000},
    {'month': 'Jun', 'households': 87000, 'persondays': 310000, 'expenditure': 12500},
    {'month': 'Jul', 'households': 94000, 'persondays': 330000, 'expenditure': 14000},
    {'month': 'Aug', 'households': 96000, 'persondays': 340000, 'expenditure': 15000},
    {'month': 'Sep', 'households': 88000, 'persondays': 300000, 'expenditure': 11800},
    {'month': 'Oct', 'households': 91000, 'persondays': 315000, 'expenditure': 12700},
    {'month': 'Nov', 'households': 93000, 'persondays': 325000, 'expenditure': 13200},
    {'month': 'Dec', 'households': 87155, 'persondays': 3443327, 'expenditure': 15209},
)

# Latest-period indicators, keyed by the field names the data.gov.in feed uses
SAMPLE_KPIS = {
    'Total_Individuals_Worked': 90928,
    'Total_Households_Worked': 87155,
    'Total_Exp': 15209,
    'Women_Persondays': 1696959,
    'Average_days_of_employment_provided_per_Household': 39,
    'percentage_payments_gererated_within_15_days': 100.74,
}


def sample_timeseries():
    """Fresh copy of the sample series, safe for callers to mutate"""
    return copy.deepcopy(list(SAMPLE_TIMESERIES))


def sample_kpis(district_name):
    kpis = {'district_name': district_name}
    kpis.update(SAMPLE_KPIS)
    return kpis
