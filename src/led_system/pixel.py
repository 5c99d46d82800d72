#!/usr/bin/env python3
"""
Pixel class - Library independent color representation

A Pixel packs an RGB color into an int so it can be handed straight to LED
strip libraries, while still exposing the individual channels.
"""


class Pixel(int):
    """Immutable RGB color packed into a 24-bit integer (0xRRGGBB)

    Usage:
        pixel = Pixel(255, 0, 0)          # Red pixel
        pixel = Pixel(0xFF0000)           # Red pixel from packed int
        print(pixel.r, pixel.g, pixel.b)  # Channel access
        dimmer = pixel.scale(128)         # Half brightness
    """

    def __new__(cls, r: int, g: int = None, b: int = None) -> 'Pixel':
        """Create pixel from RGB channels or a packed int

        Args:
            r: Red channel (0-255) OR packed 0xRRGGBB color
            g: Green channel (0-255) OR None if r is packed
            b: Blue channel (0-255) OR None if r is packed

        Raises:
            ValueError: If only some of the RGB channels are given
        """
        if g is None and b is None:
            return int.__new__(cls, int(r) & 0xFFFFFF)
        elif g is None or b is None:
            raise ValueError("Must provide either just int value or all three RGB values")
        # Channels are masked to 8 bits, the way a uint8 store would wrap them
        return int.__new__(cls, ((int(r) & 0xFF) << 16) | ((int(g) & 0xFF) << 8) | (int(b) & 0xFF))

    @property
    def r(self) -> int:
        """Red component (0-255)"""
        return (self >> 16) & 0xFF

    @property
    def g(self) -> int:
        """Green component (0-255)"""
        return (self >> 8) & 0xFF

    @property
    def b(self) -> int:
        """Blue component (0-255)"""
        return self & 0xFF

    @property
    def is_black(self) -> bool:
        return int(self) == 0

    def scale(self, amount: int) -> 'Pixel':
        """Multiply every channel by amount/256, truncating.

        Args:
            amount: Brightness 0-255 (255 is just under full)
        """
        return Pixel(self.r * amount // 256, self.g * amount // 256, self.b * amount // 256)

    def __repr__(self) -> str:
        return f"Pixel(r={self.r}, g={self.g}, b={self.b})"

    def __str__(self) -> str:
        return f"Pixel({self.r}, {self.g}, {self.b})"


BLACK = Pixel(0, 0, 0)
