PLACEHOLDER = '—'

CRORE = 10_000_000
LAKH = 100_000


def _to_number(value):
    """API payloads sometimes carry numbers as strings like '15,209'"""
    if isinstance(value, (int, float)):
        return value
    try:
        return float(str(value).replace(',', '').strip())
    except (ValueError, TypeError):
        return None


def _group_digits(n):
    if float(n).is_integer():
        return f"{int(n):,}"
    return f"{n:,.3f}".rstrip('0').rstrip('.')


def format_number(n):
    """
    Compact Indian-style rendering of a magnitude.

    >= 1 crore -> '1.5 Cr', >= 1 lakh -> '3.4 L', smaller values are
    comma grouped. None renders as a dash; text that is not a number is
    returned unchanged.
    """
    if n is None:
        return PLACEHOLDER

    value = _to_number(n)
    if value is None:
        return str(n)

    if value >= CRORE:
        return f"{value / CRORE:.1f} Cr"
    if value >= LAKH:
        return f"{value / LAKH:.1f} L"

    return _group_digits(value)
