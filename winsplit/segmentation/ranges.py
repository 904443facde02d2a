"""Window range generation over a sequence of known length.

Every adapter in this package resolves its windows through `sliding_windows`:
  hop      = step, or window_size when step == 0
  windows  = [i, i + window_size) for i = 0, hop, 2*hop, ... while it fits
  tail     = one final [i, length) when keep_tail and i < length

Ranges are half-open and always satisfy 0 <= start <= end <= length.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import operator
from typing import Iterator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WindowRange:
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def as_slice(self) -> slice:
        return slice(self.start, self.end)


def _non_negative(name: str, value) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got bool")
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value


def resolve_hop(window_size: int, step: int) -> int:
    """Distance between consecutive window starts (`step == 0` means `window_size`)."""
    return step if step != 0 else window_size


def sliding_windows(
    length: int,
    window_size: int,
    step: int = 0,
    keep_tail: bool = False,
) -> Iterator[WindowRange]:
    """Yield window ranges over `length` items.

    Args:
        length: Number of items being windowed.
        window_size: Items per full window. Zero gives zero-width windows.
        step: Distance between window starts; 0 means non-overlapping.
        keep_tail: Also yield one undersized window over leftover items.

    Yields:
        WindowRange for each window, in order of increasing start.

    A zero hop (window_size == 0 and step == 0) yields a single [0, 0) range
    instead of repeating it forever. An empty input yields nothing.
    """
    length = _non_negative("length", length)
    window_size = _non_negative("window_size", window_size)
    step = _non_negative("step", step)
    keep_tail = bool(keep_tail)

    if length == 0:
        return

    hop = resolve_hop(window_size, step)
    if hop == 0:
        logger.debug("zero hop over length %d: single empty window", length)
        yield WindowRange(0, 0)
        return

    i = 0
    while i + window_size <= length:
        yield WindowRange(i, i + window_size)
        i += hop

    if keep_tail and i < length:
        yield WindowRange(i, length)


def window_ranges(
    length: int,
    window_size: int,
    step: int = 0,
    keep_tail: bool = False,
) -> list[WindowRange]:
    """Eager form of `sliding_windows`."""
    return list(sliding_windows(length, window_size, step, keep_tail))
