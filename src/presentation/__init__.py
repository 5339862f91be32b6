"""Presentation layer - API endpoints and HTTP concerns.

This layer contains FastAPI routers and endpoint definitions. The presentation
layer is thin - it calls application services and translates their results
to HTTP responses.

Structure:
- routers/api/v1/: versioned endpoints (auth, users, password reset)
- routers/api/middleware/: request context and bearer-token dependency
- i18n/: message catalogs selected by Accept-Language

The presentation layer depends on the application layer but contains NO
business logic.
"""
