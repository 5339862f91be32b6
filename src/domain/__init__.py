"""Domain layer - Pure business logic.

The domain layer has NO dependencies on any framework or infrastructure.

Structure:
- entities/: Domain entities (mutable, have identity)
- value_objects/: Value objects (immutable, no identity)
- enums/: Domain enumerations (email templates)
- protocols/: Ports implemented by infrastructure (repositories, services)
"""
