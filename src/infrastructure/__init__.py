"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- supabase/: GoTrue token verifier and PostgREST tenant store
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
