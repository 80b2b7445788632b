# -*- coding: utf-8 -*-
"""
Navigation Geometry - Ellipses, coordinate conversions and Jacobians.

Provides:
- Semi-axes of ellipses given by generating vectors
- Rectangular <-> spherical, cylindrical and latitudinal conversions
- Jacobians mapping velocities between those coordinate systems

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

from navgeom.geometry.ellipse import (
    Ellipse,
    semi_axes,
    ellipse_from_generators,
    ellipse_to_generators,
    ellipse_point,
)

from navgeom.geometry.coordinates import (
    sphrec,
    recsph,
    cylrec,
    reccyl,
    latrec,
    reclat,
)

from navgeom.geometry.jacobians import (
    drdsph,
    drdcyl,
    drdlat,
    dsphdr,
    dcyldr,
    dlatdr,
)

__all__ = [
    # Ellipse
    "Ellipse",
    "semi_axes",
    "ellipse_from_generators",
    "ellipse_to_generators",
    "ellipse_point",
    # Coordinates
    "sphrec",
    "recsph",
    "cylrec",
    "reccyl",
    "latrec",
    "reclat",
    # Jacobians
    "drdsph",
    "drdcyl",
    "drdlat",
    "dsphdr",
    "dcyldr",
    "dlatdr",
]
