import os


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "library-api-secret-key")

    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///library.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}

    # production modunda hata detayları yanıtlara eklenmez
    APP_ENV = os.getenv("APP_ENV", "development")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    API_PREFIX = os.getenv("API_PREFIX", "/api")
    DEFAULT_PAGE_LIMIT = int(os.getenv("DEFAULT_PAGE_LIMIT", "10"))
    MAX_PAGE_LIMIT = int(os.getenv("MAX_PAGE_LIMIT", "100"))


class TestConfig(Config):
    TESTING = True
    APP_ENV = "test"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    LOG_LEVEL = "WARNING"


class ProductionConfig(Config):
    APP_ENV = "production"
