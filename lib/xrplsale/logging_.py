from __future__ import annotations

import logging

from .config_types import ClientConfig

SDK_LOGGER = "xrplsale"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class _SdkHandler(logging.StreamHandler):
    pass


def setup_logging(debug: bool | ClientConfig, *, wire: bool = False) -> logging.Logger:
    """Route the SDK's debug trace to stderr.

    ``debug`` may be a ``ClientConfig``; its ``debug`` flag decides the level,
    so the trace the transport emits for ``debug=True`` clients becomes
    visible. The httpx/httpcore request logs stay at WARNING unless ``wire``
    is also set. Calling it again adjusts levels without adding handlers.
    """
    if isinstance(debug, ClientConfig):
        debug = debug.debug
    level = logging.DEBUG if debug else logging.WARNING

    logger = logging.getLogger(SDK_LOGGER)
    logger.setLevel(level)
    if not any(isinstance(h, _SdkHandler) for h in logger.handlers):
        handler = _SdkHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    wire_level = logging.DEBUG if debug and wire else logging.WARNING
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(wire_level)
    return logger
