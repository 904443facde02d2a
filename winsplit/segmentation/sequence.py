"""Element windows over indexable sequences.

`split_sequence` returns borrowed views: they alias the source and reflect
(and are invalidated by) later mutation of it. numpy arrays are windowed with
native ndarray views; any other sequence gets a read-only `SequenceView`.
Use `sequence_windows_owned` / `SequenceSplitter.out` for independent copies.
"""

from __future__ import annotations

from collections.abc import Sequence
import copy
import logging
import operator

import numpy as np

from .ranges import WindowRange, sliding_windows

logger = logging.getLogger(__name__)


class SequenceView(Sequence):
    """Read-only window onto `source[start:end]` without copying it."""

    __slots__ = ("_source", "_start", "_end")

    def __init__(self, source: Sequence, start: int, end: int):
        if not 0 <= start <= end <= len(source):
            raise ValueError(f"Window [{start}, {end}) is outside a source of length {len(source)}")
        self._source = source
        self._start = start
        self._end = end

    @property
    def source(self) -> Sequence:
        return self._source

    @property
    def bounds(self) -> WindowRange:
        return WindowRange(self._start, self._end)

    def __len__(self) -> int:
        return self._end - self._start

    def __getitem__(self, index):
        if isinstance(index, slice):
            sub = range(self._start, self._end)[index]
            if sub.step != 1:
                # strided selections cannot alias a contiguous span
                return [self._source[i] for i in sub]
            if not sub:
                return SequenceView(self._source, self._start, self._start)
            return SequenceView(self._source, sub.start, sub.stop)
        index = operator.index(index)
        n = len(self)
        if index < 0:
            index += n
        if not 0 <= index < n:
            raise IndexError("SequenceView index out of range")
        return self._source[self._start + index]

    def __iter__(self):
        for i in range(self._start, self._end):
            yield self._source[i]

    def __eq__(self, other) -> bool:
        if isinstance(other, (SequenceView, list, tuple)):
            return len(self) == len(other) and all(a == b for a, b in zip(self, other))
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"SequenceView({list(self)!r})"

    def to_owned(self) -> list:
        """Independent copy; each element is duplicated with `copy.copy`."""
        return [copy.copy(item) for item in self]


def _borrow(seq, window: WindowRange):
    if isinstance(seq, np.ndarray):
        return seq[window.as_slice()]
    return SequenceView(seq, window.start, window.end)


def _own(view):
    if isinstance(view, np.ndarray):
        return view.copy()
    return view.to_owned()


def split_sequence(seq, window_size: int, step: int = 0, keep_tail: bool = False) -> list:
    """Split `seq` into borrowed element windows (see `sliding_windows`)."""
    views = [_borrow(seq, r) for r in sliding_windows(len(seq), window_size, step, keep_tail)]
    logger.debug("split %d elements into %d windows", len(seq), len(views))
    return views


def sequence_windows_owned(seq, window_size: int, step: int = 0, keep_tail: bool = False) -> list:
    """Like `split_sequence`, but every window is an independent copy."""
    return [_own(v) for v in split_sequence(seq, window_size, step, keep_tail)]


class SequenceSplitter:
    """Reusable element-window split of one sequence.

    `split()` gives borrowed views, `out()` gives owned copies.
    """

    def __init__(self, seq, window_size: int, step: int = 0, keep_tail: bool = False):
        self.seq = seq
        self.window_size = window_size
        self.step = step
        self.keep_tail = keep_tail

    def split(self) -> list:
        return split_sequence(self.seq, self.window_size, self.step, self.keep_tail)

    def out(self) -> list:
        return [_own(v) for v in self.split()]
