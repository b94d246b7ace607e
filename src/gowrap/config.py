from __future__ import annotations

import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path


def default_formatter() -> str:
    """Return the formatter used for generated source.

    `goimports` when it is on PATH, since it also adds missing imports; `gofmt`
    otherwise. Override with `GOWRAP_FORMATTER` (`gofmt`, `goimports` or `none`).
    """
    override = os.environ.get("GOWRAP_FORMATTER")
    if override:
        return override
    if shutil.which("goimports"):
        return "goimports"
    return "gofmt"


@dataclass(frozen=True)
class WrapConfig:
    template_path: Path
    dest_path: Path
    type_name: str
    package: str = "."  # pattern searched for the type
    work_dir: Path = field(default_factory=Path.cwd)
    target_package: str | None = None  # defaults to the package in work_dir
    formatter: str = field(default_factory=default_formatter)
    generate_command: str | None = None  # recorded in the //go:generate line
