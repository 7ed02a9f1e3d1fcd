import logging
import os

import pytest

from Backend.app import create_app
from Shared.config.database import DEFAULT_SQLITE_URI, get_database_uri
from Shared.config.dotenv_loader import load_environment


@pytest.fixture
def clean_env(monkeypatch):
    for key in ("FLASK_ENV", "POSEIDON_DB_URL", "POSEIDON_TEST_DB_URL",
                "POSEIDON_DEV_DB_URL", "SECRET_KEY"):
        # setenv first so teardown restores the original (possibly unset) value
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch


def test_development_defaults_to_local_sqlite(clean_env):
    assert get_database_uri() == DEFAULT_SQLITE_URI
    clean_env.setenv("POSEIDON_DEV_DB_URL", "sqlite:///dev.db")
    assert get_database_uri() == "sqlite:///dev.db"


def test_testing_uses_in_memory_db(clean_env):
    clean_env.setenv("FLASK_ENV", "testing")
    assert get_database_uri() == "sqlite:///:memory:"
    clean_env.setenv("POSEIDON_TEST_DB_URL", "sqlite:///other.db")
    assert get_database_uri() == "sqlite:///other.db"


def test_production_uses_configured_url(clean_env):
    clean_env.setenv("FLASK_ENV", "production")
    clean_env.setenv("POSEIDON_DB_URL", "postgresql://db/poseidon")
    assert get_database_uri() == "postgresql://db/poseidon"


def test_load_environment_returns_env_name(clean_env, tmp_path):
    clean_env.chdir(tmp_path)
    assert load_environment() == "development"


def test_load_environment_reads_dotenv_file(clean_env, tmp_path):
    clean_env.chdir(tmp_path)
    (tmp_path / ".env.development").write_text("POSEIDON_DEV_DB_URL=sqlite:///from_file.db\n")
    load_environment()
    assert os.getenv("POSEIDON_DEV_DB_URL") == "sqlite:///from_file.db"


def test_production_requires_db_url_and_secret(clean_env, tmp_path):
    clean_env.chdir(tmp_path)
    clean_env.setenv("FLASK_ENV", "production")
    with pytest.raises(RuntimeError, match="Missing env vars"):
        load_environment()


def test_file_logging(clean_env, tmp_path):
    clean_env.chdir(tmp_path)
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "LOG_TO_FILE": True,
        "LOG_DIR": str(tmp_path / "logs"),
    })
    logging.getLogger("Backend.app.services").info("hello from the service layer")

    log_file = tmp_path / "logs" / "poseidon.log"
    for handler in logging.getLogger("Backend").handlers:
        handler.flush()
    content = log_file.read_text()
    assert "Logging configured" in content
    assert "INFO:Backend.app.services:hello from the service layer" in content
    assert app.logger.handlers == []
