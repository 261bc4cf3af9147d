"""v1 router package — all /api/v1/* endpoints live here.

Files:
  legal_texts.py         — catalogue listing, facets, single text, create
  search_preferences.py  — saved searches (CRUD, recent, run)

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to dalil/services/.
"""
