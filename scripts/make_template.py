"""
make_template.py — Write a starter COE template to backend/template.docx.

The generated document contains every placeholder the backend fills in,
so it can be opened in Word and restyled (letterhead, signatories) without
touching the {{ ... }} tags.

Usage:
    python scripts/make_template.py              # writes backend/template.docx
    python scripts/make_template.py out.docx     # custom path
    python scripts/make_template.py --force      # overwrite an existing file
"""

import argparse
import os
import sys

# Add backend to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "backend"))

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH

from config import BACKEND_DIR


def build_template(path):
    doc = Document()

    title = doc.add_heading("CERTIFICATE OF EMPLOYMENT", level=1)
    title.alignment = WD_ALIGN_PARAGRAPH.CENTER

    doc.add_paragraph("TO WHOM IT MAY CONCERN:")
    doc.add_paragraph(
        "This is to certify that {{ employee_name }} is employed as "
        "{{ position }} at the {{ office_name }} from {{ start_date }} "
        "to {{ end_date }}."
    )
    doc.add_paragraph(
        "He/She receives a monthly salary of {{ salary_in_words }} "
        "({{ salary_numeric }})."
    )
    doc.add_paragraph(
        "This certification is issued upon the request of the above-named "
        "employee for whatever legal purpose it may serve."
    )
    doc.add_paragraph("Issued this {{ date_generated }}.")

    doc.save(path)


def main():
    parser = argparse.ArgumentParser(description="Create a starter COE .docx template.")
    parser.add_argument("path", nargs="?", default=os.path.join(BACKEND_DIR, "template.docx"))
    parser.add_argument("--force", action="store_true", help="overwrite an existing template")
    args = parser.parse_args()

    if os.path.exists(args.path) and not args.force:
        print(f"[TEMPLATE] {args.path} already exists — skipping (use --force to overwrite).")
        return

    build_template(args.path)
    print(f"[TEMPLATE] Written {args.path}")


if __name__ == "__main__":
    main()
