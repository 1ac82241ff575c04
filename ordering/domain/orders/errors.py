"""
Domain-specific errors for the orders bounded context.

These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class OrdersDomainError(Exception):
    """Base error for all orders domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class OrderRepositoryError(OrdersDomainError):
    """Raised when orders cannot be retrieved from the backing store."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Order retrieval failed: {reason}")
        self.reason = reason
