from __future__ import annotations

import subprocess

from .errors import FormatError

FORMATTERS = ("gofmt", "goimports", "none")


def format_source(source: str, *, formatter: str = "gofmt") -> str:
    """Pipe generated Go source through `gofmt` or `goimports`.

    `goimports` also adds and removes imports. Pass `none` to skip formatting.
    """
    if formatter == "none":
        return source
    if formatter not in FORMATTERS:
        raise FormatError(f"unknown formatter: {formatter}", source=source)

    try:
        proc = subprocess.run(
            [formatter],
            input=source.encode("utf-8"),
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
    except FileNotFoundError as e:
        raise FormatError(
            f"{formatter} not found on PATH. Install it or pass `--formatter none`.",
            source=source,
        ) from e

    if proc.returncode != 0:
        err = (proc.stderr or b"").decode("utf-8", errors="replace").strip()
        raise FormatError(f"format source: {err}", source=source)
    return (proc.stdout or b"").decode("utf-8", errors="replace")
