"""Character windows over UTF-8 text.

Windows are counted in Unicode scalar values (code points), not bytes and not
grapheme clusters. The text is scanned once for the byte offset of every
character start; window ranges from `sliding_windows` are then translated to
byte ranges, so a window never cuts a multi-byte encoding in half.

`split_text` returns `TextWindow` records that borrow one shared UTF-8 buffer
through a memoryview. When a bytes-like input is given, that buffer is the
caller's own object and must outlive (and not be mutated under) the windows.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

import numpy as np

from .ranges import sliding_windows

logger = logging.getLogger(__name__)

# UTF-8 continuation bytes look like 0b10xxxxxx
_CONTINUATION_MASK = 0xC0
_CONTINUATION_BITS = 0x80


@dataclass(frozen=True)
class TextWindow:
    start_char: int
    end_char: int
    start_byte: int
    end_byte: int
    data: memoryview

    @property
    def text(self) -> str:
        """Owned copy of the window as a `str`."""
        return str(self.data, "utf-8")

    def __len__(self) -> int:
        return self.end_char - self.start_char

    def __bytes__(self) -> bytes:
        return self.data.tobytes()

    def __str__(self) -> str:
        return self.text


def _utf8_buffer(text) -> memoryview:
    """Return a byte-format view of `text`, validating it as UTF-8."""
    if isinstance(text, str):
        return memoryview(text.encode("utf-8"))
    buf = memoryview(text).cast("B")
    str(buf, "utf-8")  # raises UnicodeDecodeError on malformed input
    return buf


def char_boundaries(data) -> np.ndarray:
    """Byte offset of every character start in UTF-8 encoded `data`.

    The result has one entry per Unicode scalar value; the end of the last
    character is `len(data)` and has no entry of its own.
    """
    if len(data) == 0:
        return np.empty(0, dtype=np.intp)
    raw = np.frombuffer(data, dtype=np.uint8)
    return np.flatnonzero((raw & _CONTINUATION_MASK) != _CONTINUATION_BITS)


def split_text(text, char_count: int, step: int = 0, keep_tail: bool = False) -> list[TextWindow]:
    """Split `text` into windows of `char_count` characters.

    Args:
        text: A `str`, or a bytes-like object holding UTF-8.
        char_count: Characters per full window.
        step: Characters between window starts; 0 means non-overlapping.
        keep_tail: Also return a final window over leftover characters.

    Returns:
        TextWindow list in order. A zero-width window [k, k) is an empty
        view positioned at the start of character k.
    """
    buf = _utf8_buffer(text)
    total_bytes = buf.nbytes
    table = char_boundaries(buf)
    num_chars = len(table)

    windows: list[TextWindow] = []
    for r in sliding_windows(num_chars, char_count, step, keep_tail):
        start_byte = int(table[r.start]) if r.start < num_chars else total_bytes
        end_byte = int(table[r.end]) if r.end < num_chars else total_bytes
        windows.append(TextWindow(
            start_char=r.start,
            end_char=r.end,
            start_byte=start_byte,
            end_byte=end_byte,
            data=buf[start_byte:end_byte],
        ))

    logger.debug("split %d chars (%d bytes) into %d windows", num_chars, total_bytes, len(windows))
    return windows


def text_windows_owned(text, char_count: int, step: int = 0, keep_tail: bool = False) -> list[str]:
    """Like `split_text`, but returns independent `str` copies."""
    return [w.text for w in split_text(text, char_count, step, keep_tail)]


class Utf8Splitter:
    """Reusable character-window split of one text.

    `split()` gives borrowed `TextWindow`s, `out()` gives owned strings.
    """

    def __init__(self, text, char_count: int, step: int = 0, keep_tail: bool = False):
        self.text = text
        self.char_count = char_count
        self.step = step
        self.keep_tail = keep_tail

    def split(self) -> list[TextWindow]:
        return split_text(self.text, self.char_count, self.step, self.keep_tail)

    def out(self) -> list[str]:
        return [w.text for w in self.split()]
