"""Application layer - Use cases and orchestration.

Structure:
- services/: session tokens, password reset, login

The application layer orchestrates domain logic and talks to storage,
email and time only through domain protocols.
"""
