import os
from dotenv import load_dotenv

load_dotenv()

BACKEND_DIR = os.path.dirname(os.path.abspath(__file__))


class Config:
    # Flask
    SECRET_KEY = os.environ.get("FLASK_SECRET_KEY", "dev-secret-change-in-production")
    ENV = os.environ.get("FLASK_ENV", "development")
    DEBUG = ENV == "development"
    PORT = int(os.environ.get("PORT", 5000))

    # Word template merged into every certificate
    COE_TEMPLATE_PATH = os.environ.get(
        "COE_TEMPLATE_PATH", os.path.join(BACKEND_DIR, "template.docx")
    )

    # Money display
    CURRENCY_PREFIX = os.environ.get("CURRENCY_PREFIX", "Php")   # "Php 1,050,540.00"
    CURRENCY_NAME   = os.environ.get("CURRENCY_NAME", "Pesos")   # "... Forty Pesos"

    # CORS — comma-separated origins, "*" allows any
    CORS_ALLOWED_ORIGINS = os.environ.get("CORS_ALLOWED_ORIGINS", "*")

    # Request bodies are a handful of scalar fields
    MAX_CONTENT_LENGTH = int(os.environ.get("MAX_CONTENT_LENGTH", 65536))  # 64 KB


class DevelopmentConfig(Config):
    DEBUG = True


class ProductionConfig(Config):
    DEBUG = False


config_map = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
}


def get_config():
    env = os.environ.get("FLASK_ENV", "development")
    return config_map.get(env, DevelopmentConfig)
