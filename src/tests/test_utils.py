"""
Tests for logging and frame timing utilities

Run with: pytest src/tests/test_utils.py -v
"""

import logging

from lightstrip_utils import HybridLogger, ClassLogger, OnceInMs


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


class TestOnceInMs:

    def test_first_call_executes(self):
        timer = OnceInMs(50, clock=FakeClock())
        assert timer.should_execute()

    def test_throttles_until_interval(self):
        clock = FakeClock()
        timer = OnceInMs(50, clock=clock)
        timer.should_execute()

        clock.now += 0.040
        assert not timer.should_execute()
        assert round(timer.remaining_ms()) == 10

        clock.now += 0.020
        assert timer.should_execute()

    def test_reset(self):
        clock = FakeClock()
        timer = OnceInMs(1000, clock=clock)
        timer.should_execute()
        assert not timer.should_execute()
        timer.reset()
        assert timer.should_execute()

    def test_elapsed_before_first_run(self):
        timer = OnceInMs(10, clock=FakeClock())
        assert timer.elapsed_ms() == float("inf")
        assert timer.remaining_ms() < 0


class TestHybridLogger:

    def test_console_only_by_default(self, capsys):
        with HybridLogger("LightStripTest") as hybrid:
            assert hybrid.log_file is None
            hybrid.get_class_logger("Effect").info("hello")
        assert "[INFO] [Effect] hello" in capsys.readouterr().out

    def test_file_output_without_colors(self, tmp_path):
        with HybridLogger("LightStripTest", log_dir=str(tmp_path)) as hybrid:
            hybrid.get_main_logger().warning("careful")
            log_file = hybrid.log_file
        content = log_file.read_text(encoding="utf-8")
        assert "[WARNING] [Main] careful" in content
        assert "\033[" not in content

    def test_level_filtering(self, capsys):
        with HybridLogger("LightStripTest") as hybrid:
            logger = hybrid.get_class_logger("Quiet", logging.WARNING)
            logger.info("hidden")
            logger.debug("hidden too")
            logger.error("shown")
            assert not logger.is_enabled_for(logging.INFO)
        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

    def test_class_loggers_are_cached(self):
        with HybridLogger("LightStripTest") as hybrid:
            assert hybrid.get_class_logger("A") is hybrid.get_class_logger("A")
            assert isinstance(hybrid.get_class_logger("A"), ClassLogger)

    def test_sibling_logger(self, capsys):
        with HybridLogger("LightStripTest") as hybrid:
            sibling = hybrid.get_main_logger().create_class_logger("Sibling")
            sibling.info("from sibling")
        assert "[Sibling] from sibling" in capsys.readouterr().out

    def test_error_with_exception(self, capsys):
        with HybridLogger("LightStripTest") as hybrid:
            logger = hybrid.get_class_logger("Runner")
            try:
                raise ValueError("bad frame")
            except ValueError as e:
                logger.error("Frame failed", exception=e)
        out = capsys.readouterr().out
        assert "Frame failed | Type: ValueError" in out
        assert "Traceback" in out

    def test_cleanup_detaches_handlers(self):
        hybrid = HybridLogger("LightStripTest")
        hybrid.cleanup()
        assert hybrid.main_logger.handlers == []
