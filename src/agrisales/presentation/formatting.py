"""Display formatting for report values.

Formatting happens only at the edge: report DTOs carry raw ``Decimal``
amounts and nothing here feeds back into computation.
"""

from decimal import ROUND_HALF_UP, Decimal

CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$",
    "CAD": "CA$",
    "AUD": "A$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
}


def format_currency(value: Decimal | int | float, currency: str = "USD") -> str:
    """Format an amount as whole currency units, e.g. ``$1,235``.

    Codes without a known symbol are prefixed with the ISO 4217 code itself.
    """
    amount = Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    code = currency.upper()
    symbol = CURRENCY_SYMBOLS.get(code)
    sign = "-" if amount < 0 else ""
    digits = f"{abs(amount):,.0f}"
    if symbol is None:
        return f"{sign}{code} {digits}"
    return f"{sign}{symbol}{digits}"


def format_percentage(value: Decimal) -> str:
    return f"{value:.1f}%"
