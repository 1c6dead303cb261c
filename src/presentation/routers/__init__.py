"""External-facing routers that sit outside the Auth Gate."""

from src.presentation.routers.system import system_router

__all__ = ["system_router"]
