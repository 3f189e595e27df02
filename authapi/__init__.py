"""
authapi: REST API backend for user registration and login.

Application package root. A modular monolith using
hexagonal architecture (ports & adapters).

Layers:
    - domain: Error taxonomy, entities, ports (ABCs).
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (datastore, password hashing) implementing domain ports.
    - interfaces: FastAPI routers, validation schemas, response models.
    - shared: Cross-cutting concerns (error boundary, validation, security, logging).
    - core: Settings and the application context.
"""
