from .heart_refill_service import HeartRefillService

__all__ = ["HeartRefillService"]
