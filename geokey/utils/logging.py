"""Package logger for geokey, plus a helper for notices that should only be logged once"""

__all__ = ['LOGGER', 'warn_once']

import logging

LOGGER = logging.getLogger('geokey')
LOGGER.setLevel(logging.WARNING)

_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
LOGGER.addHandler(_handler)

# Formatted messages already emitted by warn_once
_WARNINGS = set()


def warn_once(msg: str, *args):
    """
    Log a warning on the package logger, unless the same formatted message has
    already been logged by this process.

    Args:
        msg:
            The message, with %-style placeholders for args

        *args:
            Values substituted into msg

    Returns:
        (bool) True if the warning was logged, False if it was a repeat
    """
    key = msg % args if args else msg
    if key in _WARNINGS:
        return False

    LOGGER.warning(msg, *args)
    _WARNINGS.add(key)
    return True
