# -*- coding: utf-8 -*-
"""Tests for constants, error types and logging setup."""
import logging

import numpy as np
import pytest
from navgeom.geometry.ellipse import semi_axes
from navgeom.utils import constants
from navgeom.utils.constants import (
    PI,
    TWO_PI,
    HALF_PI,
    DEG_TO_RAD,
    RAD_TO_DEG,
    CONSTANTS,
    rpd,
    dpr,
)
from navgeom.utils.exceptions import (
    NavGeomError,
    AllocationError,
    PointOnZAxisError,
)
from navgeom.utils.logging_config import LOGGER_NAME, setup_logging


class TestConstants:
    """Test angle constants and conversion factors."""

    def test_pi(self):
        assert PI == np.pi
        assert TWO_PI == 2.0 * np.pi
        assert HALF_PI == np.pi / 2.0

    def test_degree_conversions(self):
        assert DEG_TO_RAD == pytest.approx(np.pi / 180.0, rel=1e-15)
        assert RAD_TO_DEG == pytest.approx(180.0 / np.pi, rel=1e-15)
        assert rpd() * dpr() == pytest.approx(1.0, rel=1e-15)

    def test_constants_dict(self):
        for name, value in CONSTANTS.items():
            assert getattr(constants, name) == value

    def test_all_exported(self):
        for name in constants.__all__:
            assert hasattr(constants, name)


class TestExceptions:
    """Test the navgeom exception hierarchy."""

    def test_allocation_error(self):
        """Test default message and shape attribute."""
        err = AllocationError((3, 4))
        assert isinstance(err, NavGeomError)
        assert isinstance(err, MemoryError)
        assert err.shape == (3, 4)
        assert "(3, 4)" in str(err)

    def test_allocation_error_custom_message(self):
        err = AllocationError((2,), "out of scratch")
        assert str(err) == "out of scratch"

    def test_point_on_z_axis_error(self):
        err = PointOnZAxisError(np.array([0.0, 0.0, 1.0]))
        assert isinstance(err, NavGeomError)
        assert isinstance(err, ValueError)
        np.testing.assert_array_equal(err.point, [0.0, 0.0, 1.0])


class TestSetupLogging:
    """Test package logging configuration."""

    def teardown_method(self):
        logger = logging.getLogger(LOGGER_NAME)
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)

    def test_console_handler(self):
        """Test a single console handler at the requested level."""
        logger = setup_logging(logging.DEBUG)
        assert logger.name == "navgeom"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_repeat_calls_do_not_duplicate(self):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_log_file(self, tmp_path):
        """Child loggers propagate records into the log file."""
        log_file = tmp_path / "navgeom.log"
        logger = setup_logging(logging.INFO, log_file=str(log_file))
        assert len(logger.handlers) == 2
        logging.getLogger("navgeom.geometry").info("hello from geometry")
        for handler in logger.handlers:
            handler.flush()
        assert "hello from geometry" in log_file.read_text(encoding="utf-8")

    def test_default_level_is_debug(self):
        logger = setup_logging()
        assert logger.level == logging.DEBUG
        assert logger.handlers[0].level == logging.DEBUG

    def test_reconfiguring_closes_log_file(self, tmp_path):
        """Handlers from an earlier call are closed, not just dropped."""
        logger = setup_logging(log_file=str(tmp_path / "first.log"))
        file_handler = logger.handlers[1]
        setup_logging()
        assert file_handler not in logger.handlers
        assert file_handler.stream is None

    def test_library_debug_records_reach_handler(self, tmp_path):
        log_file = tmp_path / "debug.log"
        logger = setup_logging(log_file=str(log_file))
        semi_axes(np.zeros(3), np.zeros(3))
        for handler in logger.handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "DEBUG" in text
        assert "navgeom.geometry.ellipse" in text
