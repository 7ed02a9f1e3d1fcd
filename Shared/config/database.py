# Shared/config/database.py
import os

DEFAULT_SQLITE_URI = "sqlite:///poseidon.db"

def get_database_uri():
    env = os.getenv("FLASK_ENV", "development")
    if env == "testing":
        return os.getenv("POSEIDON_TEST_DB_URL", "sqlite:///:memory:")
    elif env == "production":
        return os.getenv("POSEIDON_DB_URL")
    else:
        return os.getenv("POSEIDON_DEV_DB_URL", DEFAULT_SQLITE_URI)
