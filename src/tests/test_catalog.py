"""
Tests for the effect catalog and configuration dataclasses

Run with: pytest src/tests/test_catalog.py -v
"""

import pytest

from led_system import Pixel
from effect_system import (
    EffectName,
    create_effect,
    params_type_for,
    available_effects,
    resolve_name,
    SolidColorEffect,
    SolidDripEffect,
    RainbowCycleEffect,
    SolidColorParams,
    SolidDripParams,
    SolidCycleParams,
    RainbowSwirlParams,
    RainbowDripParams,
    RainbowCycleParams,
    LedStripConfig,
    RunnerConfig,
)


class TestCatalog:

    def test_catalog_order(self):
        assert [effect.value for effect in available_effects()] == [
            "solid_color",
            "solid_drip",
            "solid_cycle",
            "rainbow_swirl",
            "rainbow_drip",
            "rainbow_cycle",
        ]

    def test_create_by_enum_and_string(self):
        assert isinstance(create_effect(EffectName.SOLID_DRIP), SolidDripEffect)
        assert isinstance(create_effect("rainbow_cycle"), RainbowCycleEffect)

    def test_create_returns_fresh_instances(self):
        assert create_effect("solid_color") is not create_effect("solid_color")

    def test_create_passes_logger(self):
        logger = object()
        assert create_effect("solid_color", logger=logger).logger is logger

    def test_unknown_name(self):
        with pytest.raises(ValueError) as excinfo:
            create_effect("sparkle")
        assert "rainbow_swirl" in str(excinfo.value)

    def test_resolve_name(self):
        assert resolve_name("solid_cycle") is EffectName.SOLID_CYCLE
        assert resolve_name(EffectName.SOLID_CYCLE) is EffectName.SOLID_CYCLE

    @pytest.mark.parametrize("name, params_type", [
        (EffectName.SOLID_COLOR, SolidColorParams),
        (EffectName.SOLID_DRIP, SolidDripParams),
        (EffectName.SOLID_CYCLE, SolidCycleParams),
        (EffectName.RAINBOW_SWIRL, RainbowSwirlParams),
        (EffectName.RAINBOW_DRIP, RainbowDripParams),
        (EffectName.RAINBOW_CYCLE, RainbowCycleParams),
    ])
    def test_params_types(self, name, params_type):
        assert params_type_for(name) is params_type
        assert create_effect(name).name is name

    def test_every_effect_runs_with_default_params(self):
        from led_system import MemoryStrip

        for name in available_effects():
            strip = MemoryStrip(12)
            effect = create_effect(name)
            assert effect.init(strip, params_type_for(name)())
            assert effect.update(strip)


class TestEffectParams:

    def test_defaults(self):
        params = SolidDripParams()
        assert params.color == Pixel(255, 0, 0)
        assert (params.on_spacing, params.off_spacing, params.rotate) == (3, 3, True)

    def test_params_are_frozen(self):
        params = SolidColorParams()
        with pytest.raises(AttributeError):
            params.color = Pixel(0, 0, 0)

    def test_zero_spacing_is_valid(self):
        SolidDripParams(on_spacing=0, off_spacing=0).validate()
        RainbowDripParams(on_spacing=0, off_spacing=4).validate()

    @pytest.mark.parametrize("params", [
        SolidDripParams(on_spacing=-1),
        SolidDripParams(off_spacing=-2),
        RainbowDripParams(on_spacing=-1),
        SolidCycleParams(cycle_waves=0),
        RainbowCycleParams(cycle_waves=-1),
    ])
    def test_invalid_params(self, params):
        with pytest.raises(ValueError):
            params.validate()


class TestRunnerConfig:

    def make_config(self, **overrides):
        values = dict(
            strip=LedStripConfig(led_count=60),
            effect=EffectName.SOLID_DRIP,
            params=SolidDripParams(),
        )
        values.update(overrides)
        return RunnerConfig(**values)

    def test_valid_config(self):
        config = self.make_config(frame_duration_ms=20)
        config.validate()
        assert config.target_fps == 50.0

    def test_params_must_match_effect(self):
        config = self.make_config(params=RainbowSwirlParams())
        with pytest.raises(ValueError):
            config.validate()

    def test_params_are_validated(self):
        config = self.make_config(params=SolidDripParams(on_spacing=-3))
        with pytest.raises(ValueError):
            config.validate()

    @pytest.mark.parametrize("overrides", [
        dict(frame_duration_ms=0),
        dict(max_frames=-1),
        dict(strip=LedStripConfig(led_count=-1)),
        dict(strip=LedStripConfig(led_count=10, gpio_pin=40)),
        dict(strip=LedStripConfig(led_count=10, brightness=300)),
    ])
    def test_invalid_config(self, overrides):
        with pytest.raises(ValueError):
            self.make_config(**overrides).validate()

    def test_empty_strip_is_valid(self):
        self.make_config(strip=LedStripConfig(led_count=0)).validate()
