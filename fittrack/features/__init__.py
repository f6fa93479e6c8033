"""
Feature modules for FitTrack.

Each feature is a self-contained module with:
- schemas.py - Pydantic schemas
- models.py - SQLAlchemy models (optional)
- service.py / engine modules - Business logic
"""
