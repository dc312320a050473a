from .xp_calculation_service import XPCalculationService

__all__ = ["XPCalculationService"]
