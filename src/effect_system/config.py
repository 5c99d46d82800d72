"""
Effect system configuration

Effect parameter bundles, strip hardware settings and runner settings. All of
them are plain dataclasses with a validate() the caller runs; effects never
validate their own parameters.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from led_system.pixel import Pixel


class EffectName(Enum):
    """Catalog of available effects"""
    SOLID_COLOR = "solid_color"
    SOLID_DRIP = "solid_drip"
    SOLID_CYCLE = "solid_cycle"
    RAINBOW_SWIRL = "rainbow_swirl"
    RAINBOW_DRIP = "rainbow_drip"
    RAINBOW_CYCLE = "rainbow_cycle"


DEFAULT_COLOR = Pixel(255, 0, 0)


def _check_spacing(on_spacing: int, off_spacing: int) -> None:
    # Zero is allowed: it keeps the strip in the "on" phase
    if on_spacing < 0:
        raise ValueError(f"On spacing must not be negative, got {on_spacing}")
    if off_spacing < 0:
        raise ValueError(f"Off spacing must not be negative, got {off_spacing}")


@dataclass(frozen=True)
class SolidColorParams:
    """Every pixel the same color"""
    color: Pixel = DEFAULT_COLOR

    def validate(self) -> None:
        pass


@dataclass(frozen=True)
class SolidDripParams:
    """Runs of color separated by runs of black"""
    color: Pixel = DEFAULT_COLOR
    on_spacing: int = 3
    off_spacing: int = 3
    rotate: bool = True  # False keeps the drip pattern still

    def validate(self) -> None:
        _check_spacing(self.on_spacing, self.off_spacing)


@dataclass(frozen=True)
class SolidCycleParams:
    """Sine brightness waves over a single color"""
    color: Pixel = DEFAULT_COLOR
    cycle_waves: int = 1

    def validate(self) -> None:
        if self.cycle_waves <= 0:
            raise ValueError(f"Cycle waves must be positive, got {self.cycle_waves}")


@dataclass(frozen=True)
class RainbowSwirlParams:
    """One hue sweep across the strip (no settings)"""

    def validate(self) -> None:
        pass


@dataclass(frozen=True)
class RainbowDripParams:
    on_spacing: int = 3
    off_spacing: int = 3

    def validate(self) -> None:
        _check_spacing(self.on_spacing, self.off_spacing)


@dataclass(frozen=True)
class RainbowCycleParams:
    cycle_waves: int = 1

    def validate(self) -> None:
        if self.cycle_waves <= 0:
            raise ValueError(f"Cycle waves must be positive, got {self.cycle_waves}")


EffectParams = Union[SolidColorParams, SolidDripParams, SolidCycleParams,
                     RainbowSwirlParams, RainbowDripParams, RainbowCycleParams]


@dataclass
class LedStripConfig:
    """Configuration for a single LED strip"""
    led_count: int
    gpio_pin: int = 18
    freq_hz: int = 800000
    dma: int = 10
    invert: bool = False
    brightness: int = 255  # 0-255, driver setting only
    channel: int = 0

    def validate(self) -> None:
        if self.led_count < 0:
            raise ValueError(f"LED count must not be negative, got {self.led_count}")
        if not (2 <= self.gpio_pin <= 27):  # Valid RPi GPIO range
            raise ValueError(f"LED strip GPIO pin {self.gpio_pin} out of valid range (2-27)")
        if not (0 <= self.brightness <= 255):
            raise ValueError(f"LED brightness must be 0-255, got {self.brightness}")


@dataclass
class RunnerConfig:
    """Everything the effect runner needs to drive one strip"""
    strip: LedStripConfig
    effect: EffectName
    params: EffectParams = field(default_factory=SolidColorParams)
    frame_duration_ms: float = 50.0  # 20 FPS
    max_frames: Optional[int] = None  # None runs until stopped
    use_hardware: bool = False

    @property
    def target_fps(self) -> float:
        return 1000.0 / self.frame_duration_ms

    def validate(self) -> None:
        # Import here to avoid circular imports
        from .catalog import params_type_for

        self.strip.validate()
        self.params.validate()

        expected = params_type_for(self.effect)
        if not isinstance(self.params, expected):
            raise ValueError(f"{self.effect.value} needs {expected.__name__}, got {type(self.params).__name__}")

        if self.frame_duration_ms <= 0:
            raise ValueError("Frame duration must be positive")
        if self.max_frames is not None and self.max_frames < 0:
            raise ValueError(f"Max frames must not be negative, got {self.max_frames}")
