from core.config import Settings


def test_database_uri_built_from_postgres_settings():
    settings = Settings(
        POSTGRES_SERVER="db",
        POSTGRES_USER="promo",
        POSTGRES_PASSWORD="secret",
        POSTGRES_DB="partners",
        SQLALCHEMY_DATABASE_URI=None,
    )

    assert settings.SQLALCHEMY_DATABASE_URI == "postgresql+psycopg://promo:secret@db/partners"


def test_database_uri_falls_back_to_sqlite():
    settings = Settings(POSTGRES_SERVER=None, SQLALCHEMY_DATABASE_URI=None)

    assert settings.SQLALCHEMY_DATABASE_URI.startswith("sqlite:///")


def test_cors_origins_from_comma_separated_string():
    settings = Settings(BACKEND_CORS_ORIGINS="http://localhost:3000, http://localhost:4200")

    assert settings.BACKEND_CORS_ORIGINS == ["http://localhost:3000", "http://localhost:4200"]
    assert not settings.is_production
