"""
Greeter: a layered HTTP greeting service.

Application package root. A single bounded context laid out with
hexagonal architecture (ports & adapters).

Bounded contexts:
    - greeting: Say hello to a named caller.

Layers:
    - domain: Pure business logic, ports (ABCs), errors.
    - application: Use cases, DTOs, service decorators.
    - interfaces: FastAPI routers, Pydantic schemas, dependency wiring.
    - shared: Cross-cutting concerns (errors, logging).
"""
