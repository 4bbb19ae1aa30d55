"""Single-key input and screen control for the console."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import TextIO

try:
    import termios
except ImportError:  # pragma: no cover - not available on Windows
    termios = None

try:
    import msvcrt
except ImportError:
    msvcrt = None

CONTINUE_PROMPT = "Press any key to continue..."
_ANSI_CLEAR = "\x1b[2J\x1b[H"


def _terminal_fd(stream: TextIO) -> int | None:
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None
    return fd if os.isatty(fd) else None


def _read_raw_key(fd: int) -> str:
    if msvcrt is not None:
        return msvcrt.getwch()
    if termios is None:
        return os.read(fd, 1).decode("utf-8", errors="replace")
    saved = termios.tcgetattr(fd)
    raw = termios.tcgetattr(fd)
    raw[3] &= ~(termios.ICANON | termios.ECHO)
    raw[6][termios.VMIN] = 1
    raw[6][termios.VTIME] = 0
    termios.tcsetattr(fd, termios.TCSANOW, raw)
    try:
        data = os.read(fd, 1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
    return data.decode("utf-8", errors="replace")


def get_input_char(stream: TextIO | None = None) -> str:
    """Read one character without waiting for Enter.

    On a terminal the key is read unechoed and unbuffered; any other
    stream is simply read one character at a time. Returns ``""`` at
    end of input.
    """
    stream = sys.stdin if stream is None else stream
    fd = _terminal_fd(stream)
    if fd is None:
        return stream.read(1)
    return _read_raw_key(fd)


def clear_screen() -> None:
    """Clear the console window."""
    try:
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        sys.stdout.write(_ANSI_CLEAR)
        sys.stdout.flush()


def pause(prompt: str = CONTINUE_PROMPT) -> str:
    """Show ``prompt`` and wait for a single key, which is returned."""
    sys.stdout.write(prompt)
    sys.stdout.flush()
    return get_input_char()