"""Pydantic schemas package.

Folder intent:
  common.py             — CamelModel base, HealthResponse, error envelope
  listing.py            — Record, FilterCriteria, SortSpec, Facets (pipeline inputs/outputs)
  legal_text.py         — Legal text request DTOs and response model
  search_preference.py  — Saved search preference DTOs
"""
