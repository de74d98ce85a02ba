"""Domain layer exceptions for hashing failures."""


class HashingError(Exception):
    """
    Base exception for the hashing domain.

    Every failure surfaced by the hasher derives from this class so callers
    can catch the whole family at once, while ``error_code`` keeps a
    machine-readable identifier for the specific failure.

    Examples:
        - No unique salt could be generated
        - Invalid hasher configuration
        - A value could not be serialized before hashing
    """

    def __init__(self, message: str, error_code: str = "HASHING_ERROR"):
        """
        Initialize hashing exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class SaltExhaustedError(HashingError):
    """Raised when the retry cap is exceeded while searching for a unique salt."""

    def __init__(
        self,
        message: str = "Salt retry cap reached, could not generate a unique salt. "
        "The salt length might be too small for the registry size.",
    ):
        super().__init__(message, error_code="SALT_EXHAUSTED")


class InvalidConfigurationError(HashingError):
    """Raised at construction time when the hasher configuration is invalid."""

    def __init__(self, message: str = "Invalid hasher configuration"):
        super().__init__(message, error_code="INVALID_CONFIGURATION")


class NotSerializableError(HashingError):
    """Raised by a serializer when a value's type cannot be converted to bytes."""

    def __init__(self, message: str = "Type of value is not serializable"):
        super().__init__(message, error_code="NOT_SERIALIZABLE")


class NullValueError(HashingError):
    """Raised by a serializer when asked to serialize an absent value."""

    def __init__(self, message: str = "Value is None"):
        super().__init__(message, error_code="NULL_VALUE")
