"""
Pilotage Tracker Package

Collects the scheduled vessel movements published by the harbour pilots'
association and exposes them as plain records.
"""

import logging

__version__ = "0.1.0"

# Create a logger for the pilotage package
logger = logging.getLogger(__name__)
