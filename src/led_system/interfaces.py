#!/usr/bin/env python3
"""
LED Strip Interface - Abstract base class for pixel buffers

Every effect reads and writes pixels through this contract, so the same effect
code drives an in-memory buffer or a physical strip.
"""
from abc import ABC, abstractmethod
from typing import Union, List
from .pixel import Pixel


class LedStrip(ABC):
    """Fixed-length pixel buffer addressed with Python index and slice notation

    Supported Operations:
        strip[5] = Pixel(255, 0, 0)                    # Single pixel
        strip[0:10] = Pixel(0, 255, 0)                 # Slice to same color
        strip[0:3] = [pixel1, pixel2, pixel3]          # Slice to different colors
        strip[:] = Pixel(0, 0, 0)                      # Clear all

        color = strip[5]                               # Get single pixel
        colors = strip[0:10]                           # Get slice of pixels

    Invalid Operations:
        strip[5] = [pixel1, pixel2]                    # Position + list (TypeError)
        strip[len(strip)] = pixel                      # Past the end (IndexError)
    """

    @abstractmethod
    def __getitem__(self, pos: Union[int, slice]) -> Union[Pixel, List[Pixel]]:
        """Get pixel color(s). Returns single Pixel or list for slice.

        Raises:
            IndexError: If an int position is outside the buffer
        """
        pass

    @abstractmethod
    def __setitem__(self, pos: Union[int, slice], color: Union[Pixel, List[Pixel]]) -> None:
        """Set pixel(s) to color(s).

        Raises:
            TypeError: If trying to assign list to single position
            ValueError: If color list length doesn't match slice length
            IndexError: If an int position is outside the buffer
        """
        pass

    @abstractmethod
    def show(self) -> None:
        """Push the current buffer to whatever displays it."""
        pass

    @abstractmethod
    def num_pixels(self) -> int:
        """Return number of pixels in the strip."""
        pass

    def __len__(self) -> int:
        return self.num_pixels()
