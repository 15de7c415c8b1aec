"""
Type definitions used across layers
"""

from enum import StrEnum


class StateEvent(StrEnum):
    STATE_CHANGE = "statechange"
