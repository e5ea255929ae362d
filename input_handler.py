import os
import sys
import time
from enum import Enum, auto
from typing import Optional, Union

if os.name == "nt":
    import msvcrt
else:
    import select

# Seconds to wait for the rest of an escape sequence before treating it as Esc
ESCAPE_TIMEOUT = 0.05

class Key(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    TOGGLE = auto()
    NEXT = auto()
    AUTOPLAY = auto()
    RANDOM = auto()
    CLEAR = auto()
    QUIT = auto()

# Key mapping for different platforms
KEY_MAP = {
    # Unix-like (ANSI escape codes)
    '\x1b[A': Key.UP,
    '\x1b[B': Key.DOWN,
    '\x1b[D': Key.LEFT,
    '\x1b[C': Key.RIGHT,
    '\x1b': Key.QUIT,
    # Windows (msvcrt)
    repr(b'\xe0H'): Key.UP,
    repr(b'\xe0P'): Key.DOWN,
    repr(b'\xe0K'): Key.LEFT,
    repr(b'\xe0M'): Key.RIGHT,
    # Common keys
    ' ': Key.TOGGLE,
    '\r': Key.NEXT,
    '\n': Key.NEXT,
    'n': Key.NEXT,
    'a': Key.AUTOPLAY,
    'r': Key.RANDOM,
    'c': Key.CLEAR,
    'q': Key.QUIT,
}

def decode_key(user_input: Optional[Union[str, bytes]]) -> Optional[Key]:
    """Convert raw terminal input to a Key, or None if it is not bound."""
    if user_input is None:
        return None

    # Normalize input to a consistent string format
    if isinstance(user_input, bytes):
        try:
            processed_input = user_input.decode('utf-8')
        except UnicodeDecodeError:
            processed_input = repr(user_input)
    else:
        processed_input = user_input

    # Escape sequences are case sensitive ('\x1b[A' is UP), letters are not
    if len(processed_input) == 1:
        processed_input = processed_input.lower()

    return KEY_MAP.get(processed_input)

def get_key(timeout: Optional[float]) -> Optional[Key]:
    """
    Wait up to `timeout` seconds (forever if None) for a key press.
    Handles platform-specific and multi-byte key codes.
    """
    user_input = None
    if os.name == "nt":
        start_time = time.time()
        while timeout is None or (time.time() - start_time < timeout):
            if msvcrt.kbhit():
                user_input = msvcrt.getch()
                if user_input in (b'\xe0', b'\x00'):
                    user_input += msvcrt.getch()
                break
            if timeout is None:
                time.sleep(0.05)
            else:
                time.sleep(0.01)
    else:  # Unix-like
        rlist, _, _ = select.select([sys.stdin], [], [], timeout)
        if rlist:
            user_input = sys.stdin.read(1)
            # Check for the start of an escape sequence
            if user_input == '\x1b':
                # The rest of an arrow key can arrive late over a slow link
                while select.select([sys.stdin], [], [], ESCAPE_TIMEOUT)[0]:
                    next_char = sys.stdin.read(1)
                    user_input += next_char
                    # Break on common sequence terminators
                    if next_char.isalpha() or next_char == '~':
                        break

    return decode_key(user_input)
