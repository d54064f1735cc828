"""Components that read files, directories and command output."""

from __future__ import annotations

import os
import subprocess

from .util import warn

# Readers keep at most this many characters of a line.
_LINE_LIMIT = 1022


def _first_line(text: str) -> str | None:
    line = text.splitlines(keepends=True)[0] if text else ""
    line = line[:_LINE_LIMIT]
    if line.endswith("\n"):
        line = line[:-1]
    return line or None


def cat(path: str) -> str | None:
    """Return the first line of the file at ``path``, without its newline."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            line = handle.readline(_LINE_LIMIT)
    except OSError as exc:
        warn(f"fopen '{path}': {exc.strerror or exc}")
        return None
    return _first_line(line)


def num_files(path: str) -> str | None:
    """Return the number of entries in the directory ``path``."""
    try:
        entries = os.listdir(path)
    except OSError as exc:
        warn(f"opendir '{path}': {exc.strerror or exc}")
        return None
    return str(len(entries))


def run_command(cmd: str) -> str | None:
    """Run ``cmd`` through the shell and return the first line it prints."""
    try:
        completed = subprocess.run(
            cmd, shell=True, stdout=subprocess.PIPE, check=False
        )
    except OSError as exc:
        warn(f"popen '{cmd}': {exc.strerror or exc}")
        return None
    return _first_line(completed.stdout.decode("utf-8", errors="replace"))