from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger("moran_abbrev")

RIME_PREFIX = "rime:"


def _resolve_component(component: str) -> str:
    """Expand one path component: ``%VAR%`` and ``rime:`` are rewritten, anything else is kept."""
    if len(component) > 1 and component.startswith("%") and component.endswith("%"):
        return os.environ.get(component[1:-1], component)
    if component.startswith(RIME_PREFIX):
        appdata = os.environ.get("APPDATA")
        if appdata is None:
            raise RuntimeError("APPDATA is not set; rime: paths cannot be used")
        return os.path.join(appdata, "Rime", component[len(RIME_PREFIX):])
    return component


def resolve_path(path: str | os.PathLike) -> Path:
    """
    Resolve a dictionary location.

    ``%NAME%`` components become the value of environment variable NAME (kept
    as-is when unset) and a ``rime:file`` component becomes
    ``$APPDATA/Rime/file``.
    """
    resolved = Path()
    for component in Path(path).parts:
        resolved = resolved / _resolve_component(component)
    return resolved
