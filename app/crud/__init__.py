"""
CRUD operations (Create, Read, Update, Delete) for database models.

This layer provides a clean separation between API routes and database operations,
following the Repository pattern. Functions take the request's Session as
their first argument.
"""

from app.crud import base, inscricao

__all__ = ["base", "inscricao"]
