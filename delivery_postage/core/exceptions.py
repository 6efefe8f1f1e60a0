"""
Delivery Postage Exception Hierarchy

All exceptions include code, message, details and severity so callers can
log or serialize them uniformly.

Exception Hierarchy:
    PostageBaseError
    ├── InvalidArgumentError
    └── DeliveryModuleError
"""
from typing import Optional, Dict, Any


class PostageBaseError(Exception):
    """
    Base exception for all delivery postage errors.

    Attributes:
        message: Human-readable (localized) error description
        code: Machine-readable error code for programmatic handling
        details: Additional context for debugging
        severity: P0-P3 severity level
    """

    default_code: str = "POSTAGE_ERROR"
    default_severity: str = "P2"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        severity: Optional[str] = None,
    ):
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}
        self.severity = severity or self.default_severity
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "severity": self.severity,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class InvalidArgumentError(PostageBaseError, ValueError):
    """A mutator received a value outside its accepted domain."""
    default_code = "INVALID_ARGUMENT"
    default_severity = "P3"

    def __init__(
        self,
        message: str,
        argument: Optional[str] = None,
        value: Any = None,
        allowed: Optional[list] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        details.update({
            "argument": argument,
            "value": value,
            "allowed": allowed,
        })
        super().__init__(message, details=details, **kwargs)


class DeliveryModuleError(PostageBaseError):
    """A delivery module could not produce a postage."""
    default_code = "DELIVERY_MODULE_ERROR"
    default_severity = "P1"

    def __init__(
        self,
        message: str,
        module_code: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        details["module_code"] = module_code
        super().__init__(message, details=details, **kwargs)
