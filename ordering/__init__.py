"""
Ordering: order management service.

Application package root. A small modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - orders: Listing customer orders.

Layers:
    - domain: Entities, ports (ABCs), errors.
    - application: Use cases.
    - infrastructure: Adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, logging).
"""
