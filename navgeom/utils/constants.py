# -*- coding: utf-8 -*-
"""
Constants - Angular and mathematical constants for navigation geometry.

Provides commonly used constants including:
- Pi and its multiples
- Degree/radian conversion factors

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

# ===================================================================
# Mathematical Constants
# ===================================================================

#: Pi (for convenience, also available as math.pi or np.pi)
PI = 3.141592653589793

#: Two times Pi (2π)
TWO_PI = 2.0 * PI

#: Half of Pi (π/2), colatitude of the equator
HALF_PI = 0.5 * PI

# ===================================================================
# Unit Conversions
# ===================================================================

#: Degrees to radians conversion factor
DEG_TO_RAD = 0.017453292519943295  # π/180

#: Radians to degrees conversion factor
RAD_TO_DEG = 57.29577951308232  # 180/π


# ===================================================================
# Helper Functions
# ===================================================================

def rpd() -> float:
    """
    Return the number of radians per degree.

    Examples
    --------
    >>> rpd()
    0.017453292519943295
    """
    return DEG_TO_RAD


def dpr() -> float:
    """
    Return the number of degrees per radian.

    Examples
    --------
    >>> dpr()
    57.29577951308232
    """
    return RAD_TO_DEG


# ===================================================================
# Constants Dictionary (for programmatic access)
# ===================================================================

CONSTANTS = {
    'PI': PI,
    'TWO_PI': TWO_PI,
    'HALF_PI': HALF_PI,
    'DEG_TO_RAD': DEG_TO_RAD,
    'RAD_TO_DEG': RAD_TO_DEG,
}

__all__ = [
    # Mathematical
    'PI',
    'TWO_PI',
    'HALF_PI',
    # Unit conversions
    'DEG_TO_RAD',
    'RAD_TO_DEG',
    # Helper functions
    'rpd',
    'dpr',
    # Dictionary
    'CONSTANTS',
]
