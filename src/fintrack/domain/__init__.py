"""Domain layer for fintrack application.

Submodules are imported directly (e.g. ``fintrack.domain.transaction``) so
that the database layer can depend on ``fintrack.domain.entities`` without
pulling in the services.
"""
