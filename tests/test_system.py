import logging

from vintagepy import __version__
from vintagepy.kernel.system.config import APP_CONFIG, _env_int, _env_log_level
from vintagepy.kernel.system.logging import get_logger, setup_logging


def test_version_is_read():
    assert isinstance(__version__, str)
    assert __version__ != ""


def test_default_qualities():
    assert APP_CONFIG.full_jpeg_quality == 0.92
    assert APP_CONFIG.lightweight_jpeg_quality == 0.9
    assert APP_CONFIG.resave_jpeg_quality == 0.9
    assert APP_CONFIG.max_workers >= 1


def test_env_int_overrides(monkeypatch):
    monkeypatch.setenv("VINTAGEPY_TEST_INT", "12")
    assert _env_int("VINTAGEPY_TEST_INT", 3) == 12
    monkeypatch.setenv("VINTAGEPY_TEST_INT", "twelve")
    assert _env_int("VINTAGEPY_TEST_INT", 3) == 3
    monkeypatch.delenv("VINTAGEPY_TEST_INT")
    assert _env_int("VINTAGEPY_TEST_INT", 3) == 3


def test_env_log_level(monkeypatch):
    monkeypatch.setenv("VINTAGEPY_TEST_LEVEL", "debug")
    assert _env_log_level("VINTAGEPY_TEST_LEVEL", logging.INFO) == logging.DEBUG
    monkeypatch.setenv("VINTAGEPY_TEST_LEVEL", "chatty")
    assert _env_log_level("VINTAGEPY_TEST_LEVEL", logging.INFO) == logging.INFO


def test_logger_hierarchy():
    assert get_logger("vintagepy.services.rendering.engine").name == (
        "vintagepy.services.rendering.engine"
    )
    assert get_logger("perf").name == "vintagepy.perf"
    assert get_logger().name == "vintagepy"


def test_setup_logging_is_idempotent():
    logger = setup_logging()
    count = len(logger.handlers)
    setup_logging()
    assert len(logger.handlers) == count


def test_time_function_passes_result_through(caplog):
    import numpy as np

    from vintagepy.kernel.performance import time_function

    @time_function
    def double(img):
        return img * 2

    arr = np.ones((2, 3, 3), dtype=np.float32)
    with caplog.at_level(logging.DEBUG, logger="vintagepy.perf"):
        out = double(arr)

    assert double.__name__ == "double"
    np.testing.assert_array_equal(out, arr * 2)
    assert "PERF: double" in caplog.text
    assert "(2, 3, 3)" in caplog.text
