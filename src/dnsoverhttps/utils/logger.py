# logger.py
import logging
import os
import sys

import colorlog

LOG_FORMAT = '[%(levelname).4s] %(name)s: %(message)s'


def setup_logger(debug: bool = False, level_overrides: dict | None = None,
                 stream=None) -> logging.Logger:
    """
    Attach a handler to the ``dnsoverhttps`` logger, colored on a terminal.

    The library never calls this itself; applications that want its log
    lines without configuring logging on their own may call it once.

    Args:
        debug: If True, sets logging level to DEBUG, otherwise INFO
        level_overrides: Mapping of logger names to level names,
            e.g. {"dnsoverhttps.client.client": "WARNING"}
        stream: Output stream, stderr by default

    Returns:
        The package logger
    """
    logger = logging.getLogger("dnsoverhttps")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    # Calling again only adjusts levels
    if not logger.handlers:
        stream = stream or sys.stderr
        handler = logging.StreamHandler(stream)

        # Respect NO_COLOR env var (https://no-color.org/)
        if stream.isatty() and not os.environ.get("NO_COLOR"):
            handler.setFormatter(colorlog.ColoredFormatter(
                '%(log_color)s[%(levelname).4s]%(reset)s %(cyan)s%(name)s%(reset)s: %(message)s',
                log_colors={
                    'DEBUG': 'cyan',
                    'INFO': 'green',
                    'WARNING': 'yellow',
                    'ERROR': 'red',
                    'CRITICAL': 'red,bg_white',
                },
            ))
        else:
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    for name, level in (level_overrides or {}).items():
        logging.getLogger(name).setLevel(level.upper())

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """Get a logger instance for the given name.

    Args:
        name: Logger name, typically __name__ from the calling module

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
