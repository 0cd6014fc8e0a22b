"""
Billiard Boundary Coordinates
=============================

Public API for converting particle states on the boundary of a 2D billiard
between real coordinates (position, velocity) and boundary coordinates
(arclength, sine of the incidence angle).
"""

from billiard_coords.obstacles import (
    Wall,
    Semicircle,
    Circular,
    Obstacle,
    Billiard,
    Particle,
    ValidationError,
    normalvec,
)
from billiard_coords.arclength import (
    DomainError,
    totallength,
    arcintervals,
    arclength,
    real_pos,
    locate_obstacle,
    to_local,
    to_global,
)
from billiard_coords.coordinates import (
    to_bcoords,
    particle_to_bcoords,
    to_global_bcoords,
    from_bcoords,
    reflection_angle,
)
from billiard_coords.debug import (
    setup_debug_logging,
    disable_debug_logging,
    format_angle,
    format_point,
)

__all__ = [
    # Obstacles
    'Wall',
    'Semicircle',
    'Circular',
    'Obstacle',
    'Billiard',
    'Particle',
    'ValidationError',
    'normalvec',
    # Arclengths
    'DomainError',
    'totallength',
    'arcintervals',
    'arclength',
    'real_pos',
    'locate_obstacle',
    'to_local',
    'to_global',
    # Boundary coordinates
    'to_bcoords',
    'particle_to_bcoords',
    'to_global_bcoords',
    'from_bcoords',
    'reflection_angle',
    # Debug utilities
    'setup_debug_logging',
    'disable_debug_logging',
    'format_angle',
    'format_point',
]
__version__ = '0.1.0'
