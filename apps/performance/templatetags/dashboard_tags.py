from django import template
from apps.performance.formatting import format_number

register = template.Library()


@register.filter
def compact_number(value):
    """{{ kpis.Total_Exp|compact_number }} -> '1.5 L'"""
    return format_number(value)
