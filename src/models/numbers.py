"""Number formatting helpers for alert and risk text."""


def plain_number(value: float) -> str:
    """Render a number without a trailing '.0', e.g. 8.0 -> '8', 12.5 -> '12.5'."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_compact(value: float) -> str:
    """Format a number with a K/M/B suffix, e.g. 1500 -> '1.5K'."""
    if value >= 1e9:
        return f"{value / 1e9:.1f}B"
    if value >= 1e6:
        return f"{value / 1e6:.1f}M"
    if value >= 1e3:
        return f"{value / 1e3:.1f}K"
    return f"{value:.0f}"


def format_amount(value: float) -> str:
    """Format an amount with thousands separators, e.g. 15000.5 -> '15,000.5'."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}".rstrip("0").rstrip(".")
