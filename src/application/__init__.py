"""Application layer - Use cases and orchestration.

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- errors/: Application error kinds

Handlers orchestrate a caller-scoped store; authorization decisions are made
by the store, never here.
"""
