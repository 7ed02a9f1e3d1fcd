# Shared/config/dotenv_loader.py

import os
from dotenv import load_dotenv

def load_environment():
    """
    Load environment-specific .env file and validate required variables.

    - Uses FLASK_ENV (default "development") to pick .env.development,
      .env.testing or .env.production
    - Requires, when env="production":
      * POSEIDON_DB_URL
      * SECRET_KEY
      Development and testing fall back to local defaults instead.
    Returns the current environment name.
    """
    # 1) Read FLASK_ENV (default to development)
    env = os.getenv("FLASK_ENV", "development")

    # 2) Load the corresponding .env file; a missing file is not an error
    dotenv_path = f".env.{env}"
    load_dotenv(dotenv_path, override=True)

    # 3) Production must be configured explicitly
    if env == "production":
        missing = [k for k in ("POSEIDON_DB_URL", "SECRET_KEY") if not os.getenv(k)]
        if missing:
            raise RuntimeError(f"Missing env vars: {missing}")

    return env
