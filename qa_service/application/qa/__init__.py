"""
Application layer for the qa bounded context.

Use cases coordinate domain entities and the store port to fulfill
question and answer operations. No framework or infrastructure imports allowed.
"""
