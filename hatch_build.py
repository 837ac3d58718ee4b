"""Hatchling build hook that stamps kom with the git commit it was built from."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Any

from hatchling.builders.hooks.plugin.interface import BuildHookInterface

BUILD_INFO = "kom/_build_info.py"

# Field name -> git arguments producing its value
GIT_FIELDS = {
    "COMMIT": ["rev-parse", "HEAD"],
    "DATE": ["show", "-s", "--format=%cI", "HEAD"],
}


def git_output(args: list[str], cwd: Path) -> str | None:
    """Stripped stdout of a git command, or None outside a usable checkout."""
    try:
        result = subprocess.run(
            ["git", *args], cwd=cwd, capture_output=True, text=True, check=True
        )
    except (subprocess.CalledProcessError, OSError):
        return None
    return result.stdout.strip() or None


def render_build_info(fields: dict[str, str | None]) -> str:
    lines = ["# Generated by hatch_build.py; do not edit."]
    lines.extend(f"{name} = {value!r}" for name, value in fields.items())
    return "\n".join(lines) + "\n"


class CustomBuildHook(BuildHookInterface):
    """Writes kom/_build_info.py and ships it with the build."""

    def initialize(self, version: str, build_data: dict[str, Any]) -> None:
        root = Path(self.root)
        fields = {name: git_output(args, root) for name, args in GIT_FIELDS.items()}
        target = root / BUILD_INFO
        content = render_build_info(fields)
        # Rewritten only when the stamped values differ
        if not target.exists() or target.read_text(encoding="utf-8") != content:
            target.write_text(content, encoding="utf-8")
        build_data.setdefault("artifacts", []).append(BUILD_INFO)
