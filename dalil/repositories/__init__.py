"""Repositories package — async data access, one class per domain model."""
