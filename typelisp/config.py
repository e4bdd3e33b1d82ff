from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List

from typelisp.errors import TypelispConfigError


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Defaults
DEFAULT_PROMPT = '> '
DEFAULT_MAX_DEPTH = 2500
DEFAULT_LOG_LEVEL = 'WARNING'
DEFAULT_REPL_HOST = '127.0.0.1'
DEFAULT_REPL_PORT = 8765


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise TypelispConfigError(f"{var} must be an integer, got {raw!r}")


def get_prompt() -> str:
    return os.environ.get('TYPELISP_PROMPT', DEFAULT_PROMPT)


def get_max_depth() -> int:
    depth = int_from_env('TYPELISP_MAX_DEPTH', DEFAULT_MAX_DEPTH)
    if depth <= 0:
        raise TypelispConfigError(f"TYPELISP_MAX_DEPTH must be positive, got {depth}")
    return depth


def get_prelude_paths() -> List[Path]:
    # files only; a directory entry is expanded to its *.lisp files in name order
    result: List[Path] = []
    for p in paths_from_env('TYPELISP_PRELUDE_PATH', []):
        if p.is_dir():
            result.extend(sorted(p.glob('*.lisp')))
        else:
            result.append(p)
    return result


def get_log_level() -> str:
    return os.environ.get('TYPELISP_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()


def get_repl_address() -> tuple[str, int]:
    host = os.environ.get('TYPELISP_REPL_HOST', DEFAULT_REPL_HOST)
    return host, int_from_env('TYPELISP_REPL_PORT', DEFAULT_REPL_PORT)
