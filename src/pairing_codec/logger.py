"""
Custom Logging Module
^^^^^^^^^^^^^^^^^^^^^
Provides a setup_logger function to configure the package loggers using the
bundled logger.cfg.

The decoders only ever call `logging.getLogger(__name__)`; handlers are
installed when an embedding application (or the test-suite) calls
`setup_logger`.
"""
import configparser
import logging
import logging.config
import os

LOGGER_CONFIG_PATH = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "logger.cfg"
)


def setup_logger(name: str) -> logging.Logger:
    """
    Set up a logger with the provided name using the 'logger.cfg' file.
    """
    config = configparser.ConfigParser()
    config.read(LOGGER_CONFIG_PATH)
    logging.config.fileConfig(config, disable_existing_loggers=False)

    logger = logging.getLogger(name)

    return logger
