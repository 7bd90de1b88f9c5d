"""
Configuration for the pilotage tracker.
"""

from .urls import PILOTAGE_SCHEDULE_URL
from .settings import Settings, load_settings

__all__ = [
    "PILOTAGE_SCHEDULE_URL",
    "Settings",
    "load_settings",
]
