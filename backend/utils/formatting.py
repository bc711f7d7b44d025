"""
formatting.py — Display strings merged into the COE template.

    ordinal_suffix(3)                  → "rd"
    format_date_long(date(2026, 2, 3)) → "3rd day of February 2026"
    salary_to_words(1050540)           → "One Million Fifty Thousand Five Hundred Forty Pesos"
    format_salary_numeric(1050540)     → "Php 1,050,540.00"
    format_employment_date(date(1989, 8, 1)) → "August 1, 1989"

All functions are pure. Amounts are non-negative finite numbers (int, float,
Decimal or numeric string).
"""

import re
from datetime import date
from decimal import Decimal, ROUND_DOWN, ROUND_HALF_UP

from num2words import num2words


def ordinal_suffix(day: int) -> str:
    """Return "st", "nd", "rd" or "th" for a day of the month."""
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def format_date_long(d: date) -> str:
    """e.g. "21st day of March 2026" — the wording used on the signature line."""
    return f"{d.day}{ordinal_suffix(d.day)} day of {d.strftime('%B')} {d.year}"


def salary_to_words(amount, currency: str = "Pesos") -> str:
    """
    Spell the whole part of an amount in title-case English words.

    Cents are dropped, not rounded: 1500.99 → "One Thousand Five Hundred Pesos".
    num2words writes British-style "five hundred and forty" with commas and
    hyphens; those are flattened so every word stands alone.
    """
    whole = int(_to_decimal(amount).to_integral_value(rounding=ROUND_DOWN))
    words = num2words(whole, lang="en")
    words = re.sub(r"[,\-]", " ", words)
    parts = [w for w in words.split() if w != "and"]
    return " ".join(w[:1].upper() + w[1:] for w in parts) + f" {currency}"


def format_salary_numeric(amount, prefix: str = "Php") -> str:
    """Two decimals, comma thousands separators: "Php 1,050,540.00"."""
    value = _to_decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{prefix} {value:,.2f}"


def format_employment_date(d: date) -> str:
    """e.g. "August 1, 1989"."""
    return f"{d.strftime('%B')} {d.day}, {d.year}"


def _to_decimal(amount) -> Decimal:
    # str() first so floats keep their shortest repr (0.1 → "0.1", not 0.1000000000000000055…)
    return amount if isinstance(amount, Decimal) else Decimal(str(amount))
