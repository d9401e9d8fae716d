"""
HTTP interface for the qa bounded context: router, schemas, dependencies.
"""
