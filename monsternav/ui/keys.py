"""
Key input for the terminal front end: arrows / WASD to move, digits to
pick an attack, q or Esc to quit.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional
import sys

class Key(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    DIGIT = auto()
    QUIT = auto()
    OTHER = auto()

@dataclass
class KeyEvent:
    key: Key
    raw: str | bytes | None = None
    digit: Optional[int] = None

_CHAR_KEYS = {
    "w": Key.UP, "s": Key.DOWN, "a": Key.LEFT, "d": Key.RIGHT,
    "q": Key.QUIT, "\x1b": Key.QUIT, "\x03": Key.QUIT,
}
_ARROWS = {"A": Key.UP, "B": Key.DOWN, "C": Key.RIGHT, "D": Key.LEFT}
_WIN_ARROWS = {b"H": Key.UP, b"P": Key.DOWN, b"K": Key.LEFT, b"M": Key.RIGHT}

_DIRECTIONS = {Key.UP: "up", Key.DOWN: "down", Key.LEFT: "left", Key.RIGHT: "right"}

def classify(ch: str) -> KeyEvent:
    """Map a single typed character to a KeyEvent."""
    if len(ch) == 1 and ch in "123456789":
        return KeyEvent(Key.DIGIT, ch, int(ch))
    return KeyEvent(_CHAR_KEYS.get(ch.lower(), Key.OTHER), ch)

def direction_for(event: KeyEvent) -> Optional[str]:
    return _DIRECTIONS.get(event.key)

def attack_index_for(event: KeyEvent) -> Optional[int]:
    if event.key is Key.DIGIT and event.digit is not None:
        return event.digit - 1
    return None

def _win_read() -> KeyEvent:
    import msvcrt
    ch = msvcrt.getch()
    if ch in (b"\x00", b"\xe0"):
        nxt = msvcrt.getch()
        return KeyEvent(_WIN_ARROWS.get(nxt, Key.OTHER), ch + nxt)
    return classify(ch.decode("latin-1"))

def _unix_read() -> KeyEvent:
    import termios, tty
    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
        if ch == "\x1b":
            seq = sys.stdin.read(1)
            if seq == "[":
                seq2 = sys.stdin.read(1)
                return KeyEvent(_ARROWS.get(seq2, Key.OTHER), "\x1b[" + seq2)
            return KeyEvent(Key.QUIT, ch)
        return classify(ch)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)

def read_key() -> KeyEvent:
    if sys.platform.startswith("win"):
        return _win_read()
    if sys.stdin.isatty():
        return _unix_read()
    # Piped input: one command per line
    line = sys.stdin.readline()
    if not line:
        return KeyEvent(Key.QUIT, line)
    return classify(line.strip()[:1] or "\n")
