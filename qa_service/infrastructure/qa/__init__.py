"""
Infrastructure adapters for the qa bounded context.

Each adapter implements a domain port (ABC) or feeds one:
the in-memory store, its reader/writer lock, and the seed fixture.
"""
