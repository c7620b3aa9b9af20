"""Console logging set-up for the deploy command."""

import logging
import os

import coloredlogs

LOG_FORMAT = "%(asctime)s %(name)-36s %(levelname)-8s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Dependency loggers that are too chatty at INFO
NOISY_LOGGERS = ("web3", "urllib3", "aiohttp", "asyncio")


def setup_console_logging(default_log_level: str = "info") -> logging.Logger:
    """
    Install coloured console logging on the root logger.

    The LOG_LEVEL environment variable overrides default_log_level.

    :return:
        Root logger
    """
    level = os.environ.get("LOG_LEVEL", default_log_level).upper()
    numeric_level = getattr(logging, level, None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    coloredlogs.install(level=numeric_level, fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    return logging.getLogger()
