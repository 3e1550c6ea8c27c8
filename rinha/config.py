from __future__ import annotations
import os
from pathlib import Path


# Defaults
_DEFAULT_SOURCE_PATH = Path('/var/rinha/source.rinha.json')
_DEFAULT_FIB_MATRIX_THRESHOLD = 1000
_DEFAULT_RECURSION_LIMIT = 20000

_FALSE_WORDS = {'0', 'false', 'no', 'off'}


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in _FALSE_WORDS


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_source_path() -> Path:
    raw = os.environ.get('RINHA_SOURCE_PATH')
    return Path(raw) if raw else _DEFAULT_SOURCE_PATH


def fib_fast_path_enabled() -> bool:
    return flag_from_env('RINHA_FIB_FAST_PATH', True)


def get_fib_matrix_threshold() -> int:
    return int_from_env('RINHA_FIB_MATRIX_THRESHOLD', _DEFAULT_FIB_MATRIX_THRESHOLD)


def get_recursion_limit() -> int:
    return int_from_env('RINHA_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT)
