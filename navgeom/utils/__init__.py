# -*- coding: utf-8 -*-
"""
Utilities - Constants, error types and logging setup.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

from navgeom.utils.constants import (
    PI,
    TWO_PI,
    HALF_PI,
    DEG_TO_RAD,
    RAD_TO_DEG,
    rpd,
    dpr,
)

from navgeom.utils.exceptions import (
    NavGeomError,
    AllocationError,
    PointOnZAxisError,
)

from navgeom.utils.logging_config import setup_logging

__all__ = [
    "PI",
    "TWO_PI",
    "HALF_PI",
    "DEG_TO_RAD",
    "RAD_TO_DEG",
    "rpd",
    "dpr",
    "NavGeomError",
    "AllocationError",
    "PointOnZAxisError",
    "setup_logging",
]
