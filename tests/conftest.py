"""
conftest.py — Pytest fixtures for the COE Generator backend.

A starter template is written with scripts/make_template.py into a temp
directory, so tests never depend on backend/template.docx being present.
"""

import os
import sys
import pytest

# Put backend and scripts on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "backend"))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "scripts"))

os.environ.setdefault("FLASK_ENV",        "testing")
os.environ.setdefault("FLASK_SECRET_KEY", "test-secret")


@pytest.fixture(scope="session")
def template_path(tmp_path_factory):
    from make_template import build_template
    path = tmp_path_factory.mktemp("templates") / "template.docx"
    build_template(str(path))
    return str(path)


@pytest.fixture(scope="session")
def app(template_path):
    from app import create_app
    from config import Config

    class TestConfig(Config):
        TESTING              = True
        DEBUG                = False
        COE_TEMPLATE_PATH    = template_path
        CURRENCY_PREFIX      = "Php"
        CURRENCY_NAME        = "Pesos"
        CORS_ALLOWED_ORIGINS = "*"

    return create_app(TestConfig)


@pytest.fixture(scope="session")
def client(app):
    return app.test_client()


@pytest.fixture
def valid_payload():
    return {
        "name":           "Juan Dela Cruz",
        "position":       "Administrative Aide IV",
        "office_name":    "Mayor's Office",
        "salary_numeric": 1050540,
    }


@pytest.fixture
def make_docx(tmp_path):
    """Write a one-paragraph .docx with the given text and return its path."""
    def _make(text, name="custom.docx"):
        from docx import Document
        doc = Document()
        doc.add_paragraph(text)
        path = tmp_path / name
        doc.save(str(path))
        return str(path)
    return _make


@pytest.fixture
def docx_text():
    """Return a function giving all paragraph text of a .docx payload, newline-joined."""
    def _text(data: bytes) -> str:
        import io
        from docx import Document
        return "\n".join(p.text for p in Document(io.BytesIO(data)).paragraphs)
    return _text
