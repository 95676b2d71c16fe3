"""
Console logging for netgear-console.

Everything logs through the ``netgear-console`` logger.  Output is coloured
when the optional ``colorlog`` package is installed (``pip install
netgear-console[ui]``) and plain otherwise.
"""

import logging

try:
    import colorlog
    _COLORLOG_AVAILABLE = True
except ImportError:
    _COLORLOG_AVAILABLE = False

log = logging.getLogger("netgear-console")

_FORMAT = "%(asctime)s %(levelname)-7s %(message)s"
_DATEFMT = "%H:%M:%S"
_LEVEL_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


def _console_handler() -> logging.Handler:
    if not _COLORLOG_AVAILABLE:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
        return handler
    handler = colorlog.StreamHandler()
    handler.setFormatter(colorlog.ColoredFormatter(
        "%(log_color)s" + _FORMAT,
        datefmt=_DATEFMT,
        log_colors=_LEVEL_COLORS,
    ))
    return handler


def _setup_logging(debug: bool = False) -> None:
    """
    (Re)configure the package logger for console use.

    With *debug* the urllib3 connection log is switched on too, so each
    request to the switch shows up.
    """
    log.handlers.clear()
    log.addHandler(_console_handler())
    log.setLevel(logging.DEBUG if debug else logging.INFO)

    if not debug:
        return
    logging.getLogger("urllib3").setLevel(logging.DEBUG)
    if not _COLORLOG_AVAILABLE:
        log.debug("colorlog is not installed; using plain output (pip install colorlog)")


def mask(secret: str) -> str:
    """Render *secret* for log output without revealing it."""
    if len(secret) <= 4:
        return "*" * len(secret)
    return f"{secret[:2]}…({len(secret)} chars)"
