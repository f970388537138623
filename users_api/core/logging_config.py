"""
Logging setup for the service.

``setup_logging`` configures the root logger with a console handler.
Modules obtain their own logger through ``logging.getLogger(__name__)``.
"""
import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once.

    Calling it again (tests, repeated ``create_application`` calls) is a no-op
    when handlers are already attached.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
