"""
terminal.py — Raw keyboard input for Maze Chase (POSIX terminals).

raw_mode() switches the terminal to cbreak / no-echo for the lifetime of
a ``with`` block and always puts it back.  A daemon reader thread decodes
keystrokes and feeds them into a queue that the game loop polls without
blocking.
"""

import os
import signal
import sys
import termios
import threading
import tty
from contextlib import contextmanager

from maze_chase.constants import (
    ANSI_HIDE_CURSOR, ANSI_RESET, ANSI_SHOW_CURSOR, KEY_QUIT,
)
from maze_chase.renderer import clear_screen

ESC = 0x1b

# Signals that end the session but must still restore the terminal.
EXIT_SIGNALS = (signal.SIGTERM, signal.SIGHUP)

# Final byte of an arrow-key escape sequence (CSI "ESC [" or SS3 "ESC O").
ARROW_KEYS = {
    ord("A"): "up",
    ord("B"): "down",
    ord("C"): "right",
    ord("D"): "left",
}

LETTER_KEYS = {
    ord("w"): "up",
    ord("s"): "down",
    ord("d"): "right",
    ord("a"): "left",
    ord("q"): KEY_QUIT,
    ord("Q"): KEY_QUIT,
}


@contextmanager
def raw_mode(stream=None):
    """
    Put *stream* (stdin by default) in cbreak / no-echo mode.

    On exit, by any path, the original terminal attributes are restored,
    the cursor is shown again and the screen is cleared.  SIGTERM and
    SIGHUP are turned into SystemExit while the block runs, so they take
    the same path.  A stream that is not a terminal is left alone.
    """
    stream = stream if stream is not None else sys.stdin
    if not stream.isatty():
        yield
        return

    fd  = stream.fileno()
    old = termios.tcgetattr(fd)
    old_handlers = _trap_exit_signals()
    try:
        tty.setcbreak(fd)
        sys.stdout.write(ANSI_HIDE_CURSOR)
        sys.stdout.flush()
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
        sys.stdout.write(ANSI_RESET + ANSI_SHOW_CURSOR + clear_screen())
        sys.stdout.flush()
        for signum, handler in old_handlers.items():
            signal.signal(signum, handler)


def _exit_on_signal(signum, frame):
    raise SystemExit(128 + signum)


def _trap_exit_signals() -> dict:
    """Route EXIT_SIGNALS to SystemExit; return the handlers replaced."""
    # signal.signal() only works in the main thread.
    if threading.current_thread() is not threading.main_thread():
        return {}
    return {signum: signal.signal(signum, _exit_on_signal)
            for signum in EXIT_SIGNALS}


def decode_key(data: bytes):
    """
    Translate one raw read from the terminal into an input event.

    Returns "up" / "down" / "left" / "right", KEY_QUIT for a lone ESC or
    'q', or None for anything unrecognised.
    """
    if len(data) == 1:
        if data[0] == ESC:
            return KEY_QUIT
        return LETTER_KEYS.get(data[0])

    if len(data) >= 3 and data[0] == ESC and data[1] in (ord("["), ord("O")):
        return ARROW_KEYS.get(data[2])
    return None


def read_keys(fd: int, inbox):
    """
    Read keystrokes from *fd* forever, queueing decoded events.

    End of input or a read error is queued as a single quit event, after
    which the reader stops.
    """
    while True:
        try:
            data = os.read(fd, 10)
        except OSError:
            data = b""
        if not data:
            inbox.put(KEY_QUIT)
            return

        event = decode_key(data)
        if event is not None:
            inbox.put(event)


def start_reader(inbox, fd: int = None) -> threading.Thread:
    """Start a daemon thread running read_keys() on *fd* (stdin)."""
    fd = fd if fd is not None else sys.stdin.fileno()
    thread = threading.Thread(
        target=read_keys, args=(fd, inbox), name="key-reader", daemon=True)
    thread.start()
    return thread
