"""Domain package — all ORM models are imported here so Alembic autogenerate detects them.

Folder intent:
  legal_text.py         — Legal text catalogue entries
  search_preference.py  — Saved, named filter + sort presets
  mixins.py             — Shared TimestampMixin, TenantMixin
"""

from dalil.domain.legal_text import LegalText
from dalil.domain.search_preference import SearchPreference

__all__ = [
    "LegalText",
    "SearchPreference",
]
