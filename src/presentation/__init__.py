"""Presentation layer - API endpoints and HTTP concerns.

Routers dispatch commands/queries to the application layer and translate
results into HTTP responses. No business logic lives here.

Structure:
- routers/system.py: root and health endpoints (no auth)
- routers/api/middleware/: Auth Gate and trace middleware
- routers/api/v1/: resource endpoints and RFC 9457 error handling
"""
