"""
eCourts case and cause-list lookup service.
"""

__version__ = "0.1.0"
