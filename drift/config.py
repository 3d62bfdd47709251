from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List

SOURCE_SUFFIX = '.scm'


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_source_roots() -> List[Path]:
    return paths_from_env('DRIFT_PATH', [Path.cwd()])


def get_log_level() -> int:
    raw = os.environ.get('DRIFT_LOG_LEVEL', 'WARNING').strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(level: int | str | None = None) -> None:
    if level is None:
        level = get_log_level()
    elif isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')


def resolve_source(name: str | os.PathLike) -> Path:
    """Find the file for a named source unit.

    The name is tried as given, then under each root of DRIFT_PATH, both
    verbatim and with the .scm suffix appended.
    """
    direct = Path(name)
    if direct.is_file():
        return direct
    for root in get_source_roots():
        for candidate in (root / direct, root / f'{direct}{SOURCE_SUFFIX}'):
            if candidate.is_file():
                return candidate
    raise FileNotFoundError(f'Could not open file {name}')
