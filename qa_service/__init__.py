"""
QA Service: questions and answers over an in-memory store.

Application package root. This is a small service using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - qa: Questions, answers, pagination.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (in-memory store, seed fixture) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
