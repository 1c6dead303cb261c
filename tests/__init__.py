"""Test suite for the Bookkeeper API.

Test structure follows the test pyramid:
- unit/: Unit tests - domain logic, handlers and error mapping in isolation
- integration/: Supabase adapters against mocked HTTP transports (pytest-httpx)
- api/: API endpoint tests - real app, in-memory identity provider and store
"""
