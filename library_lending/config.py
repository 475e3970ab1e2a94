import os


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "library-lending-secret")

    SQLALCHEMY_DATABASE_URI = os.getenv(
        "SQLALCHEMY_DATABASE_URI",
        "sqlite:///library.db"
    )

    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}

    # create tables + views on startup (migrations can take over later)
    AUTO_CREATE_SCHEMA = os.getenv("AUTO_CREATE_SCHEMA", "1") == "1"

    # Lending policy
    LOAN_DAYS = int(os.getenv("LOAN_DAYS", "14"))
    FINE_PER_DAY = int(os.getenv("FINE_PER_DAY", "10"))

    # Reports
    TOP_BOOKS_LIMIT = int(os.getenv("TOP_BOOKS_LIMIT", "5"))


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    AUTO_CREATE_SCHEMA = True
