#!/usr/bin/env python3
"""
Light strip effect runner

Drives one effect on one strip: init once, then update and show on every
frame. This is the scheduler/driver side of the system; the effects
themselves never show or sleep.

Usage:
    lightstrip-effects rainbow_swirl --leds 60 --frames 200
    lightstrip-effects solid_drip --color 255,80,0 --on 2 --off 3 --no-rotate
    sudo lightstrip-effects rainbow_cycle --hardware --gpio-pin 18 --leds 300 --waves 2
"""

import argparse
import logging
import re
import sys
import time
from typing import List, Optional, TYPE_CHECKING

from led_system import LedStrip, MemoryStrip, PixelStripAdapter, Pixel, BLACK
from effect_system import create_effect, available_effects
from effect_system.config import (
    EffectName,
    EffectParams,
    LedStripConfig,
    RunnerConfig,
    SolidColorParams,
    SolidDripParams,
    SolidCycleParams,
    RainbowSwirlParams,
    RainbowDripParams,
    RainbowCycleParams,
    DEFAULT_COLOR,
)
from lightstrip_utils import HybridLogger, OnceInMs

if TYPE_CHECKING:
    from effect_system.effects import Effect
    from lightstrip_utils.hybrid_logger import ClassLogger


class EffectRunner:
    """
    Frame loop for a single effect on a single strip.

    Responsibilities:
    - Run the effect's init once and show the first frame
    - Update and show once per frame interval
    - Blank the strip when stopping
    """

    def __init__(self,
                 strip: LedStrip,
                 effect: 'Effect',
                 params: EffectParams,
                 logger: 'ClassLogger',
                 frame_duration_ms: float = 50.0,
                 max_frames: Optional[int] = None):
        """
        Args:
            strip: Pixel buffer (and display) to drive
            effect: Effect instance to run
            params: Parameters for effect.init
            logger: Logger for lifecycle messages
            frame_duration_ms: Minimum time between updates
            max_frames: Stop after this many updates; None runs until stopped
        """
        self.strip = strip
        self.effect = effect
        self.params = params
        self.logger = logger
        self.frame_duration_ms = frame_duration_ms
        self.max_frames = max_frames
        self.frames_shown = 0
        self.running = False

    def start(self) -> None:
        """Render and show the effect's first frame"""
        self.effect.init(self.strip, self.params)
        self.strip.show()
        self.frames_shown = 0
        self.running = True
        self.logger.info(f"Started {self.effect.get_name()} on {self.strip.num_pixels()} pixels")

    def step(self) -> None:
        """Advance one frame and show it"""
        self.effect.update(self.strip)
        self.strip.show()
        self.frames_shown += 1

    def _finished(self) -> bool:
        return self.max_frames is not None and self.frames_shown >= self.max_frames

    def run(self) -> None:
        """Start, then step at the configured frame rate until stopped"""
        try:
            self.start()
            frame_timer = OnceInMs(self.frame_duration_ms)
            frame_timer.should_execute()  # The first frame is already showing

            while self.running and not self._finished():
                if frame_timer.should_execute():
                    self.step()
                else:
                    time.sleep(max(0.0, frame_timer.remaining_ms()) / 1000.0)

        except KeyboardInterrupt:
            self.logger.info("Effect stopped by user (Ctrl+C)")
        except Exception as e:
            self.logger.error(f"Frame loop error: {e}", exception=e)
            raise
        finally:
            self.stop()

    def stop(self) -> None:
        """Stop the loop and blank the strip"""
        self.running = False
        self.strip[:] = BLACK
        self.strip.show()
        self.logger.info(f"Stopped {self.effect.get_name()} after {self.frames_shown} frames")


def parse_color(text: str) -> Pixel:
    """
    Parse "R,G,B" (0-255 each) or "#RRGGBB" / "RRGGBB".

    Raises:
        ValueError: If the text is not a color
    """
    text = text.strip()
    if "," in text:
        parts = [part.strip() for part in text.split(",")]
        if len(parts) != 3:
            raise ValueError(f"Expected R,G,B but got '{text}'")
        channels = [int(part) for part in parts]
        for channel in channels:
            if not (0 <= channel <= 255):
                raise ValueError(f"Color channel {channel} out of range (0-255)")
        return Pixel(*channels)

    hex_string = text.lstrip("#")
    if not re.fullmatch(r"[0-9a-fA-F]{6}", hex_string):
        raise ValueError(f"Expected #RRGGBB but got '{text}'")
    return Pixel(int(hex_string, 16))


def build_params(effect: EffectName, args: argparse.Namespace) -> EffectParams:
    """Parameter dataclass for effect, filled from parsed CLI arguments"""
    if effect is EffectName.SOLID_COLOR:
        return SolidColorParams(color=args.color)
    elif effect is EffectName.SOLID_DRIP:
        return SolidDripParams(color=args.color, on_spacing=args.on, off_spacing=args.off,
                               rotate=not args.no_rotate)
    elif effect is EffectName.SOLID_CYCLE:
        return SolidCycleParams(color=args.color, cycle_waves=args.waves)
    elif effect is EffectName.RAINBOW_SWIRL:
        return RainbowSwirlParams()
    elif effect is EffectName.RAINBOW_DRIP:
        return RainbowDripParams(on_spacing=args.on, off_spacing=args.off)
    else:
        return RainbowCycleParams(cycle_waves=args.waves)


def build_strip(config: RunnerConfig) -> LedStrip:
    """PixelStripAdapter for hardware runs, MemoryStrip otherwise"""
    if config.use_hardware:
        return PixelStripAdapter.from_config(config.strip)
    return MemoryStrip(config.strip.led_count)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run a light strip effect",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        'effect',
        choices=[effect.value for effect in available_effects()],
        help='Effect to run'
    )
    parser.add_argument(
        '--leds',
        type=int,
        default=60,
        help='Number of pixels on the strip (default: 60)'
    )
    parser.add_argument(
        '--color',
        type=parse_color,
        default=DEFAULT_COLOR,
        help='Base color as R,G,B or #RRGGBB (default: 255,0,0)'
    )
    parser.add_argument(
        '--on',
        type=int,
        default=3,
        help='Drip effects: pixels per lit run (default: 3)'
    )
    parser.add_argument(
        '--off',
        type=int,
        default=3,
        help='Drip effects: pixels per dark run (default: 3)'
    )
    parser.add_argument(
        '--waves',
        type=int,
        default=1,
        help='Cycle effects: brightness waves along the strip (default: 1)'
    )
    parser.add_argument(
        '--no-rotate',
        action='store_true',
        help='solid_drip: keep the pattern still'
    )
    parser.add_argument(
        '--frame-ms',
        type=float,
        default=50.0,
        help='Milliseconds between frames (default: 50)'
    )
    parser.add_argument(
        '--frames',
        type=int,
        default=None,
        help='Stop after this many frames (default: run until Ctrl+C)'
    )
    parser.add_argument(
        '--hardware',
        action='store_true',
        help='Drive a real strip through rpi_ws281x'
    )
    parser.add_argument(
        '--gpio-pin',
        type=int,
        default=18,
        help='GPIO data pin for --hardware (default: 18)'
    )
    parser.add_argument(
        '--brightness',
        type=int,
        default=255,
        help='Driver brightness 0-255 for --hardware (default: 255)'
    )
    parser.add_argument(
        '--log-dir',
        default=None,
        help='Also write logs to a timestamped file in this directory'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Log effect init/update details'
    )
    return parser


def config_from_args(args: argparse.Namespace) -> RunnerConfig:
    effect = EffectName(args.effect)
    return RunnerConfig(
        strip=LedStripConfig(
            led_count=args.leds,
            gpio_pin=args.gpio_pin,
            brightness=args.brightness,
        ),
        effect=effect,
        params=build_params(effect, args),
        frame_duration_ms=args.frame_ms,
        max_frames=args.frames,
        use_hardware=args.hardware,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    config = config_from_args(args)
    try:
        config.validate()
    except ValueError as e:
        parser.error(str(e))

    level = logging.DEBUG if args.debug else logging.INFO
    with HybridLogger("LightStrip", log_dir=args.log_dir) as hybrid_logger:
        logger = hybrid_logger.get_class_logger("EffectRunner", level)
        logger.info(f"Effect: {config.effect.value} | {config.strip.led_count} LEDs | "
                    f"{config.target_fps:.1f} FPS | hardware: {config.use_hardware}")

        try:
            strip = build_strip(config)
        except ImportError as e:
            logger.error(f"Cannot open LED strip: {e}")
            return 1

        effect = create_effect(config.effect, logger=hybrid_logger.get_class_logger(config.effect.value, level))
        runner = EffectRunner(
            strip=strip,
            effect=effect,
            params=config.params,
            logger=logger,
            frame_duration_ms=config.frame_duration_ms,
            max_frames=config.max_frames,
        )
        runner.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
