"""
entity_state.py
---------------
Defines runtime state enumerations shared by entity types.
"""

from enum import IntEnum


class Facing(IntEnum):
    """Horizontal facing direction, usable as a velocity sign."""
    LEFT = -1
    RIGHT = 1
