"""Domain layer - Pure business logic.

This layer contains the core business entities, value objects, protocols
(ports), and domain events. The domain layer has NO dependencies on any
framework or infrastructure.

Structure:
- entities/: Domain entities (have identity)
- value_objects/: Value objects (immutable, no identity), including the permission model
- events/: Domain events broadcast after commit
- protocols/: Ports implemented by infrastructure
"""
