"""
naming.py — Download file naming for generated certificates.

All certificates are served as: COE_<EmployeeName>.docx
Characters other than ASCII letters, digits, "_" and "-" are dropped,
whitespace runs become a single underscore, and underscores left at
either end are trimmed ("Juan ." → COE_Juan.docx).
Example: "Juan  Dela Cruz Jr." → COE_Juan_Dela_Cruz_Jr.docx
"""

import re


def sanitise_name(name: str) -> str:
    """Strip a person's name down to characters safe in a header filename."""
    clean = re.sub(r"[^a-zA-Z0-9\s_-]", "", str(name).strip())
    return re.sub(r"\s+", "_", clean).strip("_")


def make_coe_filename(employee_name: str, extension: str = "docx") -> str:
    """
    Generate the download filename for a certificate.

    Args:
        employee_name: Full name as submitted, e.g. "María Santos"
        extension:     File extension without dot

    Returns:
        e.g. "COE_Mara_Santos.docx"; "COE_employee.docx" when nothing survives sanitising
    """
    clean_name = sanitise_name(employee_name) or "employee"
    ext = extension.lstrip(".")
    return f"COE_{clean_name}.{ext}"
