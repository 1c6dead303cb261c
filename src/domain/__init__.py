"""Domain layer - pure bookkeeping logic.

Structure:
- entities/: Tenants, memberships, transactions and documents
- enums/: Transaction types and membership roles
- value_objects/: Identity, access decisions and financial summaries
- protocols/: Ports implemented by infrastructure adapters
- validators/ and types.py: Shared input validation rules

Nothing here imports FastAPI, httpx or structlog.
"""
