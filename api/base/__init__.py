from .errors import ApiError, ValidationError, NotFoundError, ConflictError, StoreError

__all__ = ["ApiError", "ValidationError", "NotFoundError", "ConflictError", "StoreError"]
