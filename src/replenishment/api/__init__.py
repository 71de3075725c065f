from replenishment.api.routes import replenishment_router

__all__ = ["replenishment_router"]
