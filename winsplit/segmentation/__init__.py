"""Window splitting over lengths, sequences and UTF-8 text."""

from .ranges import WindowRange, resolve_hop, sliding_windows, window_ranges
from .sequence import SequenceSplitter, SequenceView, sequence_windows_owned, split_sequence
from .text import TextWindow, Utf8Splitter, char_boundaries, split_text, text_windows_owned
from .tokens import tokenize

__all__ = [
    "WindowRange",
    "resolve_hop",
    "sliding_windows",
    "window_ranges",
    "SequenceSplitter",
    "SequenceView",
    "sequence_windows_owned",
    "split_sequence",
    "TextWindow",
    "Utf8Splitter",
    "char_boundaries",
    "split_text",
    "text_windows_owned",
    "tokenize",
]
