"""Window parameters shared by the splitters."""

from __future__ import annotations

from dataclasses import dataclass

from winsplit.segmentation.ranges import WindowRange, resolve_hop, window_ranges


@dataclass(frozen=True)
class WindowParams:
    window_size: int
    step: int = 0  # 0 => hop = window_size
    keep_tail: bool = False

    def __post_init__(self):
        for name in ("window_size", "step"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")
        if not isinstance(self.keep_tail, bool):
            raise TypeError("keep_tail must be a bool")

    @property
    def hop(self) -> int:
        return resolve_hop(self.window_size, self.step)

    def ranges(self, length: int) -> list[WindowRange]:
        return window_ranges(length, self.window_size, self.step, self.keep_tail)
