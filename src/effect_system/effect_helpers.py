"""
Helper utilities for effects: 8-bit color math, duty-cycle segmentation and
buffer rotation
"""

from typing import Iterator, Tuple, TYPE_CHECKING

from led_system.pixel import Pixel

if TYPE_CHECKING:
    from led_system.interfaces import LedStrip


# Base and slope pairs for the four 16-step sections of a sine quarter wave
_SIN8_B_M16_INTERLEAVE = (0, 49, 49, 41, 90, 27, 117, 10)

HSV_SECTION_3 = 0x40


class EffectHelpers:
    """Static helper methods for effects"""

    @staticmethod
    def scale8(i: int, scale: int) -> int:
        """Scale one byte by another: i * scale / 256."""
        return ((i & 0xFF) * (scale & 0xFF)) >> 8

    @staticmethod
    def sin8(theta: int) -> int:
        """
        FastLED-style 8-bit sine.

        Args:
            theta: Angle 0-255 for a full circle (wrapped to 8 bits)

        Returns:
            0-255 with 128 as zero: sin8(0) == 128, sin8(64) == 255,
            sin8(192) == 1
        """
        theta &= 0xFF
        offset = theta
        if theta & 0x40:
            offset = 255 - offset
        offset &= 0x3F  # 0..63

        secoffset = offset & 0x0F  # 0..15
        if theta & 0x40:
            secoffset += 1

        section = offset >> 4  # 0..3
        b = _SIN8_B_M16_INTERLEAVE[section * 2]
        m16 = _SIN8_B_M16_INTERLEAVE[section * 2 + 1]

        y = ((m16 * secoffset) >> 4) + b
        if theta & 0x80:
            y = -y

        return (y + 128) & 0xFF

    @staticmethod
    def in_positive_half(phase: float) -> bool:
        """True while the sine of phase (0-255 per circle) is not negative."""
        return int(phase / 128) % 2 == 0

    @staticmethod
    def folded_sin8(phase: float) -> int:
        """
        sin8 of phase with the negative half-cycle folded to 0.

        The even/odd half test runs on the unwrapped phase; only the sine
        lookup wraps it to 8 bits.
        """
        if not EffectHelpers.in_positive_half(phase):
            return 0
        return EffectHelpers.sin8(int(phase) & 0xFF)

    @staticmethod
    def hsv2rgb_raw(hue: int, sat: int, val: int) -> Tuple[int, int, int]:
        """
        Raw 8-bit HSV to RGB over the 0-191 hue range.

        Three 64-wide sections (red-green, green-blue, blue-red). Hues above
        191 fall into the last section again; use hsv2rgb_spectrum for a
        full 0-255 wheel.
        """
        hue &= 0xFF
        sat &= 0xFF
        val &= 0xFF

        # Minimum that every channel gets, from the desaturation
        brightness_floor = (val * (255 - sat)) // 256
        color_amplitude = val - brightness_floor

        section = hue // HSV_SECTION_3
        offset = hue % HSV_SECTION_3

        rampup = offset
        rampdown = (HSV_SECTION_3 - 1) - offset

        rampup_adj = (rampup * color_amplitude) // (256 // 4) + brightness_floor
        rampdown_adj = (rampdown * color_amplitude) // (256 // 4) + brightness_floor

        if section == 0:
            return rampdown_adj, rampup_adj, brightness_floor
        elif section == 1:
            return brightness_floor, rampdown_adj, rampup_adj
        else:
            return rampup_adj, brightness_floor, rampdown_adj

    @staticmethod
    def hsv2rgb_spectrum(hue: int, sat: int, val: int) -> Tuple[int, int, int]:
        """HSV to RGB with hue 0-255 covering the whole wheel once."""
        return EffectHelpers.hsv2rgb_raw(EffectHelpers.scale8(hue, 191), sat, val)

    @staticmethod
    def hsv_to_pixel(hue: int, sat: int = 255, val: int = 255) -> Pixel:
        """
        Convert 8-bit HSV to a Pixel.

        Args:
            hue: 0-255 around the color wheel (0 = red, 128 = cyan-blue)
            sat: Saturation 0-255
            val: Value/brightness 0-255
        """
        r, g, b = EffectHelpers.hsv2rgb_spectrum(hue, sat, val)
        return Pixel(r, g, b)

    @staticmethod
    def duty_cycle(count: int, on_spacing: int, off_spacing: int) -> Iterator[bool]:
        """
        Yield on/off for each of count positions: on_spacing on, then
        off_spacing off, repeating. The last run is cut at count.

        A phase only ends when its counter reaches its spacing and the other
        phase's spacing is non-zero, so a zero spacing on either side keeps
        every position on. A negative spacing is never reached and that phase
        never ends.
        """
        counter = 0
        on = True
        for _ in range(count):
            yield on
            counter += 1
            if on:
                if counter == on_spacing and off_spacing != 0:
                    on = False
                    counter = 0
            elif counter == off_spacing and on_spacing != 0:
                on = True
                counter = 0

    @staticmethod
    def rotate_left(strip: 'LedStrip') -> None:
        """
        Rotate the whole buffer one position toward index 0.

        Pixel 0 wraps to the end. Buffers of 0 or 1 pixels are left untouched.
        """
        num_pixels = strip.num_pixels()
        if num_pixels <= 1:
            return

        first = strip[0]
        strip[0:num_pixels - 1] = strip[1:num_pixels]
        strip[num_pixels - 1] = first
