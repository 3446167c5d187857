"""Central numerical constants for the primitive predicates.

Keeps the few magic numbers used by the kernels in one place so they can be
referenced without scattering literals.
"""
from __future__ import annotations

import sys

# Exact value a side determinant must have to count as "on the line";
# this is not a tolerance. Robustness is the kernel's job.
ON_LINE_VALUE = 0

# Machine epsilon as used by Shewchuk's predicates (half the float spacing at 1.0)
MACHINE_EPSILON: float = sys.float_info.epsilon * 0.5

# Forward error bound coefficient for the 2D orientation determinant
CCW_ERRBOUND_A: float = (3.0 + 16.0 * MACHINE_EPSILON) * MACHINE_EPSILON

# Dimensions for which concrete point types exist
SUPPORTED_DIMENSIONS = (2, 3)

__all__ = [
    'ON_LINE_VALUE',
    'MACHINE_EPSILON',
    'CCW_ERRBOUND_A',
    'SUPPORTED_DIMENSIONS',
]
