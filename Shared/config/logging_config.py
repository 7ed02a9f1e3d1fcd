# Shared/config/logging_config.py

import logging
import os

LOG_FORMAT = '%(asctime)s %(levelname)s:%(name)s:%(message)s'


def configure_logging(app):
    """
    Attach console (and optionally file) handlers to the `Backend` package
    logger. The Flask app logger ("Backend.app") and every module using
    logging.getLogger(__name__) propagate to it.

    Reads LOG_LEVEL, LOG_DIR and LOG_TO_FILE from app.config.
    """
    level = app.config.get('LOG_LEVEL', 'INFO')
    formatter = logging.Formatter(LOG_FORMAT)

    handlers = []
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if app.config.get('LOG_TO_FILE', True):
        log_dir = app.config.get('LOG_DIR', 'logs')
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(os.path.join(log_dir, 'poseidon.log'))
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    package_logger = logging.getLogger('Backend')
    # create_app may run several times in one process (tests)
    for old in list(package_logger.handlers):
        package_logger.removeHandler(old)
        old.close()
    package_logger.setLevel(level)
    for handler in handlers:
        package_logger.addHandler(handler)

    # drop Flask's default handler so records are not emitted twice
    app.logger.handlers.clear()

    app.logger.info("Logging configured (level=%s, file=%s)", level, app.config.get('LOG_TO_FILE', True))
