"""
Matrix representation of linear systems.

Public API:
    LinearSystem(matrix)            wrap existing storage, no copy
    LinearSystem.from_array(data)   build from any array-like
"""

from pylinsys.system.linear_system import LinearSystem

__all__ = [
    "LinearSystem",
]
