from .validation_service import ConfigValidationService

__all__ = ["ConfigValidationService"]
