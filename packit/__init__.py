"""
PackIT — packing-list recommendations for a trip.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters) with domain-driven design.

Bounded contexts:
    - packing: Packing lists, default items, weather-aware creation.

Layers:
    - domain: Pure business logic, entities, value objects, ports (ABCs), errors.
    - application: Command and query handlers, DTOs, orchestration.
    - infrastructure: Adapters (storage, weather API) implementing ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
