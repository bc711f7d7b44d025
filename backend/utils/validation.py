"""
validation.py — Validation of the COE request body.

Request body
------------
{
    "name":                  str,        # required — full name as printed
    "position":              str,        # required — position title
    "office_name":           str,        # required — one of OFFICE_OPTIONS (free text accepted)
    "salary_numeric":        number|str, # required — non-negative monthly salary
    "start_date_raw":        str|null,   # optional — "YYYY-MM-DD"
    "end_date_raw":          str|null,   # required with start_date_raw unless currently employed
    "is_currently_employed": bool        # optional — end date renders as "present"
}

validate_coe_request() never raises on bad input: it returns a
ValidationResult carrying either the normalised CoeRequest or one
aggregated error message for the caller to send back as a 400.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Optional


OFFICE_OPTIONS = [
    "Mayor's Office",
    "Vice Mayor's Office",
    "HRMO",
    "MSWDO",
    "Engineering Office",
    "Budget Office",
    "Accounting Office",
    "Assessor's Office",
    "Civil Registrar's Office",
    "Health Office",
    "BPLO",
    "DILG",
    "Tourism Office",
    "Agriculture Office",
    "Environment and Natural Resources Office",
    "Disaster Risk Reduction and Management Office",
    "Legal Office",
    "Information Office",
    "Sangguniang Bayan",
    "Other",
]

TEXT_FIELDS = ["name", "position", "office_name"]

# Upper bound keeps amounts inside the 28-digit decimal context and num2words' range
MAX_SALARY = Decimal("1e15")

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@dataclass(frozen=True)
class CoeRequest:
    name: str
    position: str
    office_name: str
    salary: Decimal
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_currently_employed: bool = False


@dataclass(frozen=True)
class ValidationResult:
    request: Optional[CoeRequest] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def validate_coe_request(payload) -> ValidationResult:
    if not isinstance(payload, dict):
        payload = {}

    missing = [f for f in TEXT_FIELDS if not _clean_text(payload.get(f))]
    if payload.get("salary_numeric") in (None, ""):
        missing.append("salary_numeric")

    start_raw = payload.get("start_date_raw")
    end_raw = payload.get("end_date_raw")
    currently_employed = bool(payload.get("is_currently_employed"))
    if start_raw and not currently_employed and not end_raw:
        missing.append("end_date_raw")

    if missing:
        return _fail(f"Missing required field(s): {', '.join(missing)}")

    salary = parse_salary(payload["salary_numeric"])
    if salary is None:
        return _fail("salary_numeric must be a valid non-negative number.")

    start_date = end_date = None
    if start_raw:
        start_date = parse_iso_date(start_raw)
        if start_date is None:
            return _fail("start_date_raw must be in YYYY-MM-DD format.")
        if not currently_employed:
            end_date = parse_iso_date(end_raw)
            if end_date is None:
                return _fail("end_date_raw must be in YYYY-MM-DD format.")
            if end_date < start_date:
                return _fail("end_date_raw must not be earlier than start_date_raw.")

    return ValidationResult(request=CoeRequest(
        name=_clean_text(payload["name"]),
        position=_clean_text(payload["position"]),
        office_name=_clean_text(payload["office_name"]),
        salary=salary,
        start_date=start_date,
        end_date=end_date,
        is_currently_employed=currently_employed,
    ))


def parse_salary(value) -> Optional[Decimal]:
    """
    Return the salary as a Decimal, or None unless it is a finite number in
    [0, MAX_SALARY). Grouped input ("12,000", "12_000") is rejected.
    """
    if isinstance(value, bool):
        return None
    text = str(value).strip()
    if "_" in text:
        return None
    try:
        amount = Decimal(text)
    except (InvalidOperation, ValueError):
        return None
    if not amount.is_finite() or amount < 0 or amount >= MAX_SALARY:
        return None
    # "-0" passes the sign check; drop the sign so it prints as 0.00
    return amount.copy_abs()


def parse_iso_date(value) -> Optional[date]:
    """Parse a strict "YYYY-MM-DD" string; None for anything else (including 2026-02-30)."""
    if not isinstance(value, str) or not _DATE_PATTERN.match(value):
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None


# ─── Private helpers ──────────────────────────────────────────────────────────

def _clean_text(value) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _fail(message: str) -> ValidationResult:
    return ValidationResult(error=message)
