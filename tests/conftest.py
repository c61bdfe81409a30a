from _pytest.config import Config

from pairing_codec.logger import setup_logger


def pytest_configure(config: Config) -> None:
    """
    Install the package log handlers for the test session.
    """
    setup_logger("pairing_codec")
