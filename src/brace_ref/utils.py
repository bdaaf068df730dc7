from __future__ import annotations

import os as _os
import sys
from typing import Optional

DEBUG_PY_TRACE_ENV = "BRACE_DEBUG_PY_TRACE"
TRACE_SCOPES_ENV = "BRACE_TRACE_SCOPES"

_TRUTHY = {"1", "true", "yes", "on"}


def envvar_value_by_name(name: str) -> Optional[str]:
    """Get the current value of an env var by name, or None if missing."""
    return _os.environ.get(name)


def env_flag(name: str) -> bool:
    raw = envvar_value_by_name(name)
    if raw is None:
        return False

    return raw.strip().lower() in _TRUTHY


def debug_py_trace_enabled() -> bool:
    """Show Python tracebacks after Brace error messages."""
    return env_flag(DEBUG_PY_TRACE_ENV)


def trace_scopes_enabled() -> bool:
    return env_flag(TRACE_SCOPES_ENV)


def trace_scope(event: str, depth: int) -> None:
    print(f"[scope] {event} depth={depth}", file=sys.stderr)
