"""Default constants shared by the vector_core math modules."""

from __future__ import annotations

# Tolerance used when deciding whether a vector has unit length.
EPSILON = 1e-15

DEFAULT_DIMENSION = 2

# Component indices.
X = 0
Y = 1
Z = 2
W = 3

# Component indices for polar coordinates.
R = 0
PHI = 1
