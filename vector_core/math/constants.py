"""Named direction vectors and angles (radians).

Direction vectors are frozen; copy them before mutating.
"""

from __future__ import annotations

from math import cos, pi, sin

from .frozen import immutable_of

ANGLE_0 = 0.0
ANGLE_30 = pi / 6
ANGLE_45 = pi / 4
ANGLE_60 = pi / 3
ANGLE_90 = pi / 2
ANGLE_180 = pi
ANGLE_270 = pi * 3 / 2
ANGLE_360 = pi * 2

# Direction aliases.
ANGLE_UP = ANGLE_0
ANGLE_LEFT = ANGLE_90
ANGLE_DOWN = ANGLE_180
ANGLE_RIGHT = ANGLE_270

LEFT = immutable_of(-1.0, 0.0)
RIGHT = immutable_of(1.0, 0.0)
UP = immutable_of(0.0, 1.0)
DOWN = immutable_of(0.0, -1.0)
ZERO = immutable_of(0.0, 0.0)

UP_LEFT = immutable_of(-cos(ANGLE_45), sin(ANGLE_45))
UP_RIGHT = immutable_of(cos(ANGLE_45), sin(ANGLE_45))
DOWN_LEFT = immutable_of(-cos(ANGLE_45), -sin(ANGLE_45))
DOWN_RIGHT = immutable_of(cos(ANGLE_45), -sin(ANGLE_45))
