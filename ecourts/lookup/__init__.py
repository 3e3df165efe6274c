"""
Lookup-or-generate service over the record store.
"""

from .service import CaseQuery, CauseListQuery, LookupService

__all__ = ["CaseQuery", "CauseListQuery", "LookupService"]
