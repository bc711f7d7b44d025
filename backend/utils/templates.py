"""
templates.py — Certificate of Employment template rendering.

The template is a normal Word document whose text contains Jinja-style
placeholders, e.g. "This is to certify that {{ employee_name }} ...".
docxtpl substitutes them and re-packs the archive; this module only loads the
file, renders, and turns engine failures into the two errors routes care about.

Placeholders every template may use (see COE_PLACEHOLDERS):
    employee_name, position, office_name,
    salary_in_words, salary_numeric, date_generated,
    start_date, end_date
"""

import io
import logging
import os

import jinja2
from docxtpl import DocxTemplate

logger = logging.getLogger(__name__)

COE_PLACEHOLDERS = [
    "employee_name",
    "position",
    "office_name",
    "salary_in_words",
    "salary_numeric",
    "date_generated",
    "start_date",
    "end_date",
]

DOCX_MIMETYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class TemplateNotFoundError(Exception):
    """The configured template file does not exist."""


class TemplateRenderError(Exception):
    """docxtpl/Jinja rejected the template or a placeholder had no value."""


def render_coe_document(context: dict, template_path: str) -> bytes:
    """
    Render the COE template with the given context.
    Returns the .docx file contents.

    Raises TemplateNotFoundError / TemplateRenderError.
    """
    if not os.path.isfile(template_path):
        raise TemplateNotFoundError(
            f"{os.path.basename(template_path)} not found at {template_path}. "
            "Please add your COE template file."
        )

    tpl = DocxTemplate(template_path)
    # StrictUndefined: a tag with no matching context key is an error, not blank text
    env = jinja2.Environment(undefined=jinja2.StrictUndefined, autoescape=True)

    try:
        tpl.render(context, jinja_env=env)
    except jinja2.TemplateError as e:
        logger.warning(f"Template render failed for {template_path}: {e}")
        raise TemplateRenderError(_describe(e)) from e

    buf = io.BytesIO()
    tpl.save(buf)
    return buf.getvalue()


def _describe(exc: jinja2.TemplateError) -> str:
    if isinstance(exc, jinja2.TemplateSyntaxError) and exc.lineno:
        return f"{exc.message} (line {exc.lineno})"
    return str(exc.message or exc)
