"""Namespaced loggers for calclex modules."""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a standard library logger under the "calclex." namespace.

    The library installs no handlers; ``calclex -v`` configures output.
    """
    if not (name == "calclex" or name.startswith("calclex.")):
        name = f"calclex.{name}"
    return logging.getLogger(name)
