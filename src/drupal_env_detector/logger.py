import logging
import os

from drupal_env_detector.constants import LOG_FILE_ENV


def setup_logger(name=__name__):
    """
    Get a DEBUG logger for a module of this package.

    Records go to the file named by DRUPAL_ENV_DETECTOR_LOG_FILE when it is
    set. Otherwise the logger only propagates to whatever logging the host
    application configured, and this package writes nothing itself.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    if not logger.handlers:
        log_file = os.getenv(LOG_FILE_ENV)
        if log_file:
            fh = logging.FileHandler(log_file, delay=True)
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
            logger.addHandler(fh)
        else:
            logger.addHandler(logging.NullHandler())

    return logger
