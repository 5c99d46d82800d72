"""
Effect base class and concrete effect implementations

An effect writes a starting frame into a pixel buffer with init() and then
produces the next frame from the current one with every update(). Effects
compute pixel values only: they never call strip.show() and never sleep.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Type, TYPE_CHECKING

from led_system.pixel import BLACK
from .config import (
    EffectName,
    EffectParams,
    SolidColorParams,
    SolidDripParams,
    SolidCycleParams,
    RainbowSwirlParams,
    RainbowDripParams,
    RainbowCycleParams,
)
from .effect_helpers import EffectHelpers

if TYPE_CHECKING:
    from led_system.interfaces import LedStrip
    from lightstrip_utils.hybrid_logger import ClassLogger


class EffectState(Enum):
    INITIALIZED = "initialized"
    RUNNING = "running"


class Effect(ABC):
    """
    Abstract base class for strip effects.

    Lifecycle:
        effect.init(strip, params)   # -> INITIALIZED
        effect.update(strip)         # -> RUNNING, repeat once per frame

    An instance keeps no pixel state of its own: the buffer is the state, so
    one instance per strip is all that's needed and the caller owns timing.
    """

    name: EffectName
    params_type: Type

    def __init__(self, logger: Optional['ClassLogger'] = None):
        """
        Args:
            logger: Optional logger for init/update tracing
        """
        self.logger: Optional['ClassLogger'] = logger
        self.params: Optional[EffectParams] = None
        self.state: Optional[EffectState] = None
        self.frame_count: int = 0

    def get_name(self) -> str:
        return self.__class__.__name__

    def init(self, strip: 'LedStrip', params: EffectParams) -> bool:
        """
        Overwrite every pixel with the effect's starting frame.

        Args:
            strip: Pixel buffer to fill
            params: This effect's parameter dataclass

        Returns:
            True on success

        Raises:
            TypeError: If params belong to another effect
        """
        if not isinstance(params, self.params_type):
            raise TypeError(f"{self.get_name()} needs {self.params_type.__name__}, got {type(params).__name__}")

        self.params = params
        num_pixels = strip.num_pixels()
        if num_pixels > 0:
            self.render(strip, num_pixels)

        self.state = EffectState.INITIALIZED
        self.frame_count = 0
        if self.logger:
            self.logger.debug(f"{self.get_name()} initialized on {num_pixels} pixels with {params}")
        return True

    def update(self, strip: 'LedStrip') -> bool:
        """
        Advance the buffer by one frame in place.

        Returns:
            True on success
        """
        if strip.num_pixels() > 1:
            self.advance(strip)

        self._count_frame()
        return True

    def _count_frame(self) -> None:
        self.state = EffectState.RUNNING
        self.frame_count += 1
        if self.logger and self.logger.is_enabled_for(logging.DEBUG):
            self.logger.debug(f"{self.get_name()} frame {self.frame_count}")

    @abstractmethod
    def render(self, strip: 'LedStrip', num_pixels: int) -> None:
        """Write the starting frame from self.params (num_pixels >= 1)."""
        pass

    @abstractmethod
    def advance(self, strip: 'LedStrip') -> None:
        """Turn the current frame into the next one (num_pixels >= 2)."""
        pass


class RotatingEffect(Effect):
    """Effect that animates by rotating its starting frame one pixel per update"""

    def advance(self, strip: 'LedStrip') -> None:
        EffectHelpers.rotate_left(strip)


class SolidColorEffect(Effect):
    """Whole strip in one color; update never changes anything"""

    name = EffectName.SOLID_COLOR
    params_type = SolidColorParams

    def render(self, strip: 'LedStrip', num_pixels: int) -> None:
        strip[:] = self.params.color

    def advance(self, strip: 'LedStrip') -> None:
        pass


class SolidDripEffect(RotatingEffect):
    """
    Runs of color separated by runs of black, drifting toward index 0.

    Motion follows params.rotate unless update() is given an explicit flag.
    """

    name = EffectName.SOLID_DRIP
    params_type = SolidDripParams

    def render(self, strip: 'LedStrip', num_pixels: int) -> None:
        color = self.params.color
        strip[:] = [color if on else BLACK
                    for on in EffectHelpers.duty_cycle(num_pixels, self.params.on_spacing, self.params.off_spacing)]

    def update(self, strip: 'LedStrip', rotate: Optional[bool] = None) -> bool:
        """
        Args:
            strip: Pixel buffer to advance
            rotate: Override params.rotate for this frame; False is a no-op
        """
        if rotate is None:
            rotate = self.params.rotate if self.params is not None else True

        if not rotate:
            self._count_frame()
            return True
        return super().update(strip)


class SolidCycleEffect(RotatingEffect):
    """Sine brightness waves over one color; the dark half of each wave is black"""

    name = EffectName.SOLID_CYCLE
    params_type = SolidCycleParams

    def render(self, strip: 'LedStrip', num_pixels: int) -> None:
        color = self.params.color
        wave_scalar = 256.0 / num_pixels * self.params.cycle_waves

        for i in range(num_pixels):
            strip[i] = color.scale(EffectHelpers.folded_sin8(i * wave_scalar))


class RainbowSwirlEffect(RotatingEffect):
    """One full hue sweep along the strip, turning"""

    name = EffectName.RAINBOW_SWIRL
    params_type = RainbowSwirlParams

    def render(self, strip: 'LedStrip', num_pixels: int) -> None:
        hue_scalar = 256.0 / num_pixels

        for i in range(num_pixels):
            strip[i] = EffectHelpers.hsv_to_pixel(int(i * hue_scalar), 255, 255)


class RainbowDripEffect(RotatingEffect):
    """Rainbow sweep cut into runs with black gaps, same spacing rules as SolidDrip"""

    name = EffectName.RAINBOW_DRIP
    params_type = RainbowDripParams

    def render(self, strip: 'LedStrip', num_pixels: int) -> None:
        hue_scalar = 256.0 / num_pixels
        phases = EffectHelpers.duty_cycle(num_pixels, self.params.on_spacing, self.params.off_spacing)

        for i, on in enumerate(phases):
            if on:
                strip[i] = EffectHelpers.hsv_to_pixel(int(i * hue_scalar), 255, 255)
            else:
                strip[i] = BLACK


class RainbowCycleEffect(RotatingEffect):
    """Rainbow sweep with SolidCycle's brightness waves on top"""

    name = EffectName.RAINBOW_CYCLE
    params_type = RainbowCycleParams

    def render(self, strip: 'LedStrip', num_pixels: int) -> None:
        hue_scalar = 256.0 / num_pixels
        wave_scalar = 256.0 / num_pixels * self.params.cycle_waves

        for i in range(num_pixels):
            brightness = EffectHelpers.folded_sin8(i * wave_scalar)
            if brightness:
                strip[i] = EffectHelpers.hsv_to_pixel(int(i * hue_scalar), 255, brightness)
            else:
                strip[i] = BLACK
