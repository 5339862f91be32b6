"""Infrastructure layer - Adapters and external integrations.

Implementations of domain protocols (ports):

Structure:
- persistence/: SQLAlchemy models, database manager, repositories
- security/: bcrypt hashing, opaque token generation
- email/: stub and SMTP email adapters
- logging/: structlog console adapter
- clock/: system clock
- jobs/: background token cleanup

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
