from __future__ import annotations

from contextvars import ContextVar


_run_id: ContextVar[str | None] = ContextVar("run_id", default=None)
_stage: ContextVar[str | None] = ContextVar("stage", default=None)
_errors: ContextVar[list[str] | None] = ContextVar("errors", default=None)


def bind_context(*, run_id: str) -> None:
    _run_id.set(run_id)
    _stage.set(None)
    _errors.set([])


def set_stage(stage: str) -> None:
    _stage.set(stage)


def add_error(message: str) -> None:
    errs = list(_errors.get() or [])
    errs.append(message)
    _errors.set(errs)


def snapshot() -> dict[str, object]:
    """Return a snapshot of current observability context for logging."""

    out: dict[str, object] = {}
    if (v := _run_id.get()) is not None:
        out["run_id"] = v
    if (v := _stage.get()) is not None:
        out["stage"] = v
    out["errors"] = list(_errors.get() or [])
    return out
