"""
Synthetic record generation.
"""

from .mock import HEARING_TIMES, generate_case, generate_cause_list, rng_for_key

__all__ = ["HEARING_TIMES", "generate_case", "generate_cause_list", "rng_for_key"]
