"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing, CSI navigation keys, and multi-byte UTF-8.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
MAX_SEQUENCE_BYTES = 16
UNKNOWN_KEY = "UNKNOWN"
_PENDING_BYTES: list[bytes] = []

_CONTROL_KEYS: dict[bytes, str] = {
    b"\x03": "CTRL_C",
    b"\x06": "CTRL_F",
    b"\x0b": "CTRL_K",
    b"\x11": "CTRL_Q",
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\r": "ENTER",
    b"\n": "ENTER",
}

_CSI_FINAL_KEYS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}

_CSI_TILDE_KEYS: dict[bytes, str] = {
    b"1": "HOME",
    b"7": "HOME",
    b"4": "END",
    b"8": "END",
    b"5": "PAGE_UP",
    b"6": "PAGE_DOWN",
}

_SS3_KEYS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}


def _read_byte(fd: int) -> bytes:
    data = os.read(fd, 1)
    if not data:
        raise EOFError("terminal input closed")
    return data


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    return _read_byte(fd)


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _read_utf8_char(fd: int, first: bytes) -> str:
    data = first
    for _ in range(_utf8_length(first[0]) - 1):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        data += nxt
    return data.decode("utf-8", errors="replace")


def _decode_csi(fd: int) -> str:
    """Decode the remainder of an ``ESC [`` sequence."""
    params = b""
    while len(params) < MAX_SEQUENCE_BYTES:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return "ESC"
        if 0x40 <= part[0] <= 0x7E:
            break
        params += part
    else:
        return UNKNOWN_KEY

    if part == b"~":
        return _CSI_TILDE_KEYS.get(params.split(b";")[0], UNKNOWN_KEY)
    key = _CSI_FINAL_KEYS.get(part)
    if key is None:
        return UNKNOWN_KEY
    if params == b"1;2" and key in {"LEFT", "RIGHT"}:
        return f"SHIFT_{key}"
    return key


def _next_byte(fd: int, timeout_ms: int | None) -> bytes | None:
    """Return one byte, preferring bytes pushed back by an earlier ESC."""
    if _PENDING_BYTES:
        return _PENDING_BYTES.pop(0)
    if timeout_ms is None:
        return _read_byte(fd)
    return _read_ready_byte(fd, timeout_ms)


def _decode_escape(fd: int) -> str:
    """Decode what follows a lone ``ESC`` byte."""
    introducer = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if introducer == b"[":
        return _decode_csi(fd)
    if introducer == b"O":
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        return _SS3_KEYS.get(final, UNKNOWN_KEY) if final is not None else "ESC"
    if introducer is not None:
        # Alt+key: report ESC now and replay the key on the next read.
        _PENDING_BYTES.append(introducer)
    return "ESC"


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token; returns ``""`` when ``timeout_ms`` elapses first.

    Raises ``EOFError`` once the input side is closed.
    """
    first = _next_byte(fd, timeout_ms)
    if first is None:
        return ""
    if first == b"\x1b":
        return _decode_escape(fd)
    return _CONTROL_KEYS.get(first) or _read_utf8_char(fd, first)
