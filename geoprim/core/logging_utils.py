"""Logging utilities for geoprim.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. All geoprim code should obtain loggers via get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_ROOT_NAME = 'geoprim'
_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')


def _ensure_package_root() -> logging.Logger:
    """Ensure the 'geoprim' logger is isolated from the process root logger.

    Only NullHandlers (added by the package __init__) are left in place here;
    a real stream handler is attached by configure_logging().
    """
    root = logging.getLogger(_ROOT_NAME)
    root.propagate = False
    return root


def _attach_stream_handler(root: logging.Logger) -> None:
    # Drop NullHandlers so they do not swallow output
    for h in list(root.handlers):
        if isinstance(h, logging.NullHandler):
            root.removeHandler(h)
    # only a handler writing to stdout counts; capture handlers (e.g. pytest's)
    # also subclass StreamHandler
    has_stdout = any(isinstance(h, logging.StreamHandler) and getattr(h, 'stream', None) is sys.stdout
                     for h in root.handlers)
    if not has_stdout:
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        root.addHandler(handler)


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    value = getattr(logging, str(level).upper(), None)
    if isinstance(value, int):
        return value
    return default


def configure_logging(level: Union[str, int] = 'INFO') -> None:
    """Configure the 'geoprim' logger family level and attach a stdout handler.

    This does NOT modify the process root logger.
    """
    root = _ensure_package_root()
    _attach_stream_handler(root)
    root.setLevel(_to_level(level))


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'geoprim' namespace.

    If a level is provided, it sets the logger's level; otherwise the logger
    is set to NOTSET so it inherits from the 'geoprim' parent configured via
    configure_logging().
    """
    _ensure_package_root()
    if name != _ROOT_NAME and not name.startswith(_ROOT_NAME + '.'):
        name = f'{_ROOT_NAME}.{name}'
    log = logging.getLogger(name)
    if level is not None:
        log.setLevel(_to_level(level))
    else:
        log.setLevel(logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging']
