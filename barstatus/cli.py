"""Command line entry point that renders the status line periodically."""

from __future__ import annotations

import os
import select
import signal
import subprocess
import sys
import time
from dataclasses import dataclass
from typing import Iterable

from . import config
from .config import StatusArg
from .util import StatusError, warn

VERSION = "1.1"
PROG = "barstatus"


@dataclass(frozen=True)
class Options:
    """Parsed command line flags."""

    stdout: bool = False
    once: bool = False


def _usage() -> StatusError:
    return StatusError(f"usage: {PROG} [-v] [-s] [-1]")


def parse_args(argv: Iterable[str]) -> Options:
    """Parse flags; raise StatusError for -v, unknown flags or stray operands."""
    args = list(argv)
    stdout = once = False
    while args and args[0].startswith("-") and len(args[0]) > 1:
        flag = args.pop(0)
        if flag == "--":
            break
        for char in flag[1:]:
            if char == "v":
                raise StatusError(f"{PROG}-{VERSION}")
            if char == "1":
                once = True
                stdout = True
            elif char == "s":
                stdout = True
            else:
                raise _usage()
    if args:
        raise _usage()
    return Options(stdout=stdout, once=once)


def render(args: Iterable[StatusArg], unknown: str) -> str:
    """Build the status line from ``args``, using ``unknown`` for missing values."""
    status = ""
    for arg in args:
        result = arg.func(arg.args)
        if result is None:
            result = unknown
        try:
            piece = arg.fmt % result
        except (TypeError, ValueError) as exc:
            warn(f"vsnprintf: {exc}")
            break
        if len(status) + len(piece) >= config.MAXLEN:
            warn("vsnprintf: Output truncated")
            break
        status += piece
    return status


class _Stdout:
    def store(self, status: str) -> None:
        try:
            print(status)
            sys.stdout.flush()
        except OSError as exc:
            raise StatusError(f"puts: {exc.strerror or exc}") from exc

    def close(self) -> None:
        pass


class _RootWindow:
    """Sets the root window name, which window managers show in their bar."""

    def __init__(self) -> None:
        if not os.environ.get("DISPLAY"):
            raise StatusError("XOpenDisplay: Failed to open display")

    @staticmethod
    def _set(name: str) -> None:
        subprocess.run(["xsetroot", "-name", name], check=True)

    def store(self, status: str) -> None:
        try:
            self._set(status)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise StatusError(f"XStoreName: {exc}") from exc

    def close(self) -> None:
        try:
            self._set("")
        except (OSError, subprocess.CalledProcessError) as exc:
            raise StatusError(f"XCloseDisplay: {exc}") from exc


class _Signals:
    """Stops the loop on SIGINT/SIGTERM and wakes the sleep on SIGUSR1."""

    _SIGNALS = (signal.SIGINT, signal.SIGTERM, signal.SIGUSR1)

    def __init__(self, done: bool) -> None:
        self.done = done
        self._previous: dict[int, object] = {}
        self._read_fd = self._write_fd = -1
        self._old_wakeup = -1

    def _handle(self, signo: int, frame: object) -> None:
        if signo != signal.SIGUSR1:
            self.done = True

    def __enter__(self) -> "_Signals":
        self._read_fd, self._write_fd = os.pipe()
        os.set_blocking(self._read_fd, False)
        os.set_blocking(self._write_fd, False)
        self._old_wakeup = signal.set_wakeup_fd(self._write_fd)
        for signo in self._SIGNALS:
            self._previous[signo] = signal.signal(signo, self._handle)
        return self

    def __exit__(self, *exc_info: object) -> None:
        for signo, handler in self._previous.items():
            signal.signal(signo, handler)
        signal.set_wakeup_fd(self._old_wakeup)
        os.close(self._read_fd)
        os.close(self._write_fd)

    def sleep(self, seconds: float) -> None:
        try:
            ready, _, _ = select.select([self._read_fd], [], [], seconds)
        except InterruptedError:
            return
        if ready:
            try:
                while os.read(self._read_fd, 512):
                    pass
            except BlockingIOError:
                pass


def _run(options: Options) -> None:
    output = _Stdout() if options.stdout else _RootWindow()
    with _Signals(options.once) as signals:
        while True:
            start = time.monotonic()
            output.store(render(config.ARGS, config.UNKNOWN_STR))
            if signals.done:
                break
            wait = config.INTERVAL / 1000 - (time.monotonic() - start)
            if wait >= 0:
                signals.sleep(wait)
            if signals.done:
                break
    output.close()


def main(argv: list[str] | None = None) -> int:
    """Run the status program; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        _run(parse_args(argv))
    except StatusError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())