"""
Effect System - pixel pattern engine for addressable LED strips

Each effect fills a pixel buffer with a starting frame (init) and then
produces the next frame from the current one (update). Driving the strip
and deciding when to update are left to the caller.

Usage:
    from led_system import MemoryStrip
    from effect_system import create_effect, SolidDripParams

    strip = MemoryStrip(60)
    effect = create_effect("solid_drip")
    effect.init(strip, SolidDripParams(on_spacing=2, off_spacing=3))
    effect.update(strip)
"""

from .config import (
    EffectName,
    SolidColorParams,
    SolidDripParams,
    SolidCycleParams,
    RainbowSwirlParams,
    RainbowDripParams,
    RainbowCycleParams,
    LedStripConfig,
    RunnerConfig,
)
from .effect_helpers import EffectHelpers
from .effects import (
    Effect,
    EffectState,
    RotatingEffect,
    SolidColorEffect,
    SolidDripEffect,
    SolidCycleEffect,
    RainbowSwirlEffect,
    RainbowDripEffect,
    RainbowCycleEffect,
)
from .catalog import create_effect, params_type_for, available_effects, resolve_name

__all__ = [
    # Base classes
    "Effect",
    "EffectState",
    "RotatingEffect",
    # Effects
    "SolidColorEffect",
    "SolidDripEffect",
    "SolidCycleEffect",
    "RainbowSwirlEffect",
    "RainbowDripEffect",
    "RainbowCycleEffect",
    "EffectHelpers",
    # Catalog
    "EffectName",
    "create_effect",
    "params_type_for",
    "available_effects",
    "resolve_name",
    # Configuration
    "SolidColorParams",
    "SolidDripParams",
    "SolidCycleParams",
    "RainbowSwirlParams",
    "RainbowDripParams",
    "RainbowCycleParams",
    "LedStripConfig",
    "RunnerConfig",
]
