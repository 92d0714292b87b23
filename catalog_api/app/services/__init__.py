"""
Service layer abstraction.

Each service encapsulates the business rules for one resource and is
the only path through which its store is mutated.  Services raise the
typed failures from ``core.exceptions``; they never return ``None`` for
a missing entity the caller asked for by id.
"""
