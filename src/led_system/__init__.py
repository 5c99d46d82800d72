#!/usr/bin/env python3
"""
LED System - Library independent pixel buffers

- Pixel: RGB color class that extends int
- LedStrip: Abstract fixed-length pixel buffer
- MemoryStrip: In-memory LedStrip for development and tests
- PixelStripAdapter: rpi_ws281x implementation of LedStrip

Usage:
    from led_system import MemoryStrip, Pixel

    strip = MemoryStrip(led_count=60)
    strip[0] = Pixel(255, 0, 0)         # Red pixel
    strip[1:5] = Pixel(0, 255, 0)       # Green pixels
    strip.show()
"""

from .pixel import Pixel, BLACK
from .interfaces import LedStrip
from .memory_strip import MemoryStrip
from .pixel_strip_adapter import PixelStripAdapter

__all__ = ['Pixel', 'BLACK', 'LedStrip', 'MemoryStrip', 'PixelStripAdapter']

__version__ = '1.0.0'
