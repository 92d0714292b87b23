"""
Domain models.

``Person`` is a plain dataclass kept in the in-memory store; ``Product``
is an SQLAlchemy mapped class persisted in the ``products`` table.
"""
