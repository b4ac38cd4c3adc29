"""Logging helpers for rs274.

The library only creates loggers; attaching handlers is left to the
application.
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return a standard library logger namespaced under ``rs274.``.

    Parameters
    ----------
    name:
        Logger name, usually ``__name__``. Names outside the package
        get the ``rs274.`` prefix so every record shares one parent.

    Returns
    -------
    A ``logging.Logger``; no handlers are attached.
    """
    if not (name == "rs274" or name.startswith("rs274.")):
        name = f"rs274.{name}"
    return logging.getLogger(name)
