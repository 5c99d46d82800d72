#!/usr/bin/env python3
"""
PixelStrip Adapter - rpi_ws281x wrapper implementing LedStrip

The hardware driver used by the effect runner. This is the only file that
depends on rpi_ws281x; effects never import it.
"""
from typing import Union, List, TYPE_CHECKING
from .interfaces import LedStrip
from .pixel import Pixel

if TYPE_CHECKING:
    from effect_system.config import LedStripConfig

try:
    from rpi_ws281x import PixelStrip
except ImportError:
    # Not on a Raspberry Pi; construction fails with a clear message instead
    PixelStrip = None


class PixelStripAdapter(LedStrip):
    """Adapter that wraps rpi_ws281x PixelStrip to implement LedStrip

    Pixel IS an int, so pixels are stored in the native strip without
    conversion. Reads come back from the strip's own buffer, which makes the
    strip itself the effect's pixel buffer.
    """

    def __init__(self, led_count: int, gpio_pin: int, freq_hz: int = 800000,
                 dma: int = 10, invert: bool = False, brightness: int = 255,
                 channel: int = 0) -> None:
        """
        Args:
            led_count: Number of LEDs in the strip
            gpio_pin: GPIO pin connected to strip data line (must be PWM pin)
            freq_hz: Signal frequency in hertz (default 800kHz)
            dma: DMA channel to use (default 10)
            invert: Whether to invert the signal (default False)
            brightness: Driver brightness 0-255 (default 255)
            channel: PWM channel to use (default 0)

        Raises:
            ImportError: If rpi_ws281x is not available
        """
        if PixelStrip is None:
            raise ImportError("rpi_ws281x not available - run on Raspberry Pi")

        self._led_count = led_count
        self._strip = PixelStrip(led_count, gpio_pin, freq_hz, dma,
                                 invert, brightness, channel)
        self._strip.begin()

    @classmethod
    def from_config(cls, config: 'LedStripConfig') -> 'PixelStripAdapter':
        return cls(led_count=config.led_count, gpio_pin=config.gpio_pin,
                   freq_hz=config.freq_hz, dma=config.dma, invert=config.invert,
                   brightness=config.brightness, channel=config.channel)

    def _check_index(self, pos: int) -> int:
        if pos < 0:
            pos += self._led_count
        if pos < 0 or pos >= self._led_count:
            raise IndexError(f"Pixel index {pos} out of range for {self._led_count} pixels")
        return pos

    def __getitem__(self, pos: Union[int, slice]) -> Union[Pixel, List[Pixel]]:
        if isinstance(pos, slice):
            return [Pixel(self._strip.getPixelColor(i))
                    for i in range(*pos.indices(self._led_count))]
        return Pixel(self._strip.getPixelColor(self._check_index(pos)))

    def __setitem__(self, pos: Union[int, slice], color: Union[Pixel, List[Pixel]]) -> None:
        if isinstance(pos, slice):
            indices = range(*pos.indices(self._led_count))
            if isinstance(color, list):
                if len(color) != len(indices):
                    raise ValueError(f"Color list length ({len(color)}) must match slice length ({len(indices)})")
                for i, pixel in zip(indices, color):
                    self._strip.setPixelColor(i, pixel)
            else:
                for i in indices:
                    self._strip.setPixelColor(i, color)
        else:
            if isinstance(color, list):
                raise TypeError("Cannot assign list of colors to single position")
            self._strip.setPixelColor(self._check_index(pos), color)

    def show(self) -> None:
        """Render the buffer to the LEDs (roughly 10ms per 300 pixels)."""
        self._strip.show()

    def num_pixels(self) -> int:
        return self._led_count
