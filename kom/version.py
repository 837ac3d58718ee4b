from __future__ import annotations

import importlib.metadata
from typing import NamedTuple, Optional

from .constants import PagerConstants


class BuildInfo(NamedTuple):
    commit: Optional[str]
    date: Optional[str]


def get_package_version() -> Optional[str]:
    try:
        return importlib.metadata.version(PagerConstants.APP_NAME)
    except importlib.metadata.PackageNotFoundError:
        return None


def get_build_info() -> BuildInfo:
    # Generated at build time by the hatch build hook
    try:
        from . import _build_info  # type: ignore
    except ImportError:
        return BuildInfo(commit=None, date=None)
    return BuildInfo(
        commit=getattr(_build_info, "COMMIT", None),
        date=getattr(_build_info, "DATE", None),
    )


def get_version_string() -> str:
    version = get_package_version() or "unknown"
    info = get_build_info()
    # Use short (7-character) git hashes when available
    commit = info.commit[:7] if info.commit else "unknown"
    date = info.date or "unknown"
    return f"{PagerConstants.APP_NAME} {version} ({commit} {date})"
