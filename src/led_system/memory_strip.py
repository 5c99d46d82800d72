#!/usr/bin/env python3
"""
MemoryStrip - In-memory LedStrip implementation

Holds the pixel buffer in a plain list. Used for development without
hardware, for simulation, and by the tests.
"""
from typing import Union, List
from .interfaces import LedStrip
from .pixel import Pixel, BLACK


class MemoryStrip(LedStrip):
    """LedStrip backed by a Python list, starting all black

    show() only counts frames; nothing is transmitted anywhere.
    """

    def __init__(self, led_count: int) -> None:
        """
        Args:
            led_count: Number of pixels (0 is allowed and gives an empty buffer)

        Raises:
            ValueError: If led_count is negative
        """
        if led_count < 0:
            raise ValueError(f"LED count must not be negative, got {led_count}")
        self._pixels: List[Pixel] = [BLACK] * led_count
        self.show_count: int = 0

    def _check_index(self, pos: int) -> int:
        count = len(self._pixels)
        if pos < 0:
            pos += count
        if pos < 0 or pos >= count:
            raise IndexError(f"Pixel index {pos} out of range for {count} pixels")
        return pos

    def __getitem__(self, pos: Union[int, slice]) -> Union[Pixel, List[Pixel]]:
        if isinstance(pos, slice):
            return self._pixels[pos]
        if isinstance(pos, int):
            return self._pixels[self._check_index(pos)]
        raise TypeError(f"Invalid index type: {type(pos).__name__}")

    def __setitem__(self, pos: Union[int, slice], color: Union[Pixel, List[Pixel]]) -> None:
        if isinstance(pos, slice):
            indices = range(*pos.indices(len(self._pixels)))
            if isinstance(color, list):
                if len(color) != len(indices):
                    raise ValueError(f"Color list length ({len(color)}) must match slice length ({len(indices)})")
                for i, pixel in zip(indices, color):
                    self._pixels[i] = Pixel(pixel)
            else:
                pixel = Pixel(color)
                for i in indices:
                    self._pixels[i] = pixel
        elif isinstance(pos, int):
            if isinstance(color, list):
                raise TypeError("Cannot assign list of colors to single position")
            self._pixels[self._check_index(pos)] = Pixel(color)
        else:
            raise TypeError(f"Invalid index type: {type(pos).__name__}")

    def show(self) -> None:
        self.show_count += 1

    def num_pixels(self) -> int:
        return len(self._pixels)

    def snapshot(self) -> List[Pixel]:
        """Copy of the whole buffer, for comparing frames."""
        return list(self._pixels)

    def __repr__(self) -> str:
        return f"MemoryStrip(led_count={len(self._pixels)})"
