from __future__ import annotations

from .context import add_error, bind_context, set_stage, snapshot
from .ids import new_run_id
from .logging import configure_logging, get_logger

__all__ = [
    "add_error",
    "bind_context",
    "configure_logging",
    "get_logger",
    "new_run_id",
    "set_stage",
    "snapshot",
]
