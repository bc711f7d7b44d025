"""
coe.py — Certificate of Employment generation routes.

    POST /api/generate-coe  → .docx download (or {"error": ...})
    GET  /api/offices       → office names offered by the form

Filename convention: COE_<EmployeeName>.docx (utils/naming.py)
"""

import io
import logging
from datetime import date

from flask import Blueprint, request, send_file, current_app

from utils.formatting import (
    format_date_long,
    format_employment_date,
    format_salary_numeric,
    salary_to_words,
)
from utils.naming import make_coe_filename
from utils.response import success, bad_request, server_error
from utils.templates import (
    DOCX_MIMETYPE,
    TemplateNotFoundError,
    TemplateRenderError,
    render_coe_document,
)
from utils.validation import OFFICE_OPTIONS, validate_coe_request

coe_bp = Blueprint("coe", __name__)
logger = logging.getLogger(__name__)


# ════════════════════════════════════════════════════════════
#  Generate certificate
# ════════════════════════════════════════════════════════════

@coe_bp.route("/generate-coe", methods=["POST"])
def generate_coe():
    """
    POST /api/generate-coe
    Body JSON: { "name", "position", "office_name", "salary_numeric",
                 "start_date_raw"?, "end_date_raw"?, "is_currently_employed"? }

    Returns the filled template as an attachment.
    400 on invalid input, 500 on template problems.
    """
    body = request.get_json(silent=True) or {}

    result = validate_coe_request(body)
    if not result.ok:
        logger.info(f"COE request rejected: {result.error}")
        return bad_request(result.error)

    coe = result.request
    try:
        context = build_template_context(coe)
        document = render_coe_document(context, current_app.config["COE_TEMPLATE_PATH"])
    except TemplateNotFoundError as e:
        logger.error(f"COE template missing: {e}")
        return server_error(str(e))
    except TemplateRenderError as e:
        logger.error(f"COE template error: {e}")
        return server_error(f"Template error: {e}")
    except Exception:
        logger.exception("COE generation failed")
        return server_error()

    filename = make_coe_filename(coe.name)
    logger.info(f"COE generated: {filename} ({len(document)} bytes)")

    return send_file(
        io.BytesIO(document),
        mimetype=DOCX_MIMETYPE,
        as_attachment=True,
        download_name=filename,
    )


# ════════════════════════════════════════════════════════════
#  Office list
# ════════════════════════════════════════════════════════════

@coe_bp.route("/offices", methods=["GET"])
def list_offices():
    """
    GET /api/offices
    Office/department names shown in the form's dropdown.
    """
    return success({"offices": OFFICE_OPTIONS})


# ════════════════════════════════════════════════════════════
#  Helpers
# ════════════════════════════════════════════════════════════

def build_template_context(coe, today: date = None) -> dict:
    """Map a validated CoeRequest to the placeholder values of the template."""
    if today is None:
        today = date.today()

    cfg = current_app.config
    if coe.start_date is None:
        start_date = end_date = ""
    else:
        start_date = format_employment_date(coe.start_date)
        end_date = "present" if coe.is_currently_employed else format_employment_date(coe.end_date)

    return {
        "employee_name":   coe.name,
        "position":        coe.position,
        "office_name":     coe.office_name,
        "salary_in_words": salary_to_words(coe.salary, cfg["CURRENCY_NAME"]),
        "salary_numeric":  format_salary_numeric(coe.salary, cfg["CURRENCY_PREFIX"]),
        "date_generated":  format_date_long(today),
        "start_date":      start_date,
        "end_date":        end_date,
    }
