"""
Core formatting primitives, derived metrics, and domain models.

This module contains the pure building blocks of the dashboard that are
independent of the UI layer, the identity provider and the database.
"""
