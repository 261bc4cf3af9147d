"""Services package — all business logic lives here, never in routers.

Files:
  filtering.py           — filter predicate evaluation (pure)
  sorting.py             — French-collation record ordering (pure)
  facets.py              — distinct filter values (pure)
  listing.py             — filter -> sort -> paginate pipeline (pure)
  legal_text.py          — legal text catalogue service
  search_preferences.py  — saved search preferences service
  catalogue.py           — demo catalogue seeding

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
