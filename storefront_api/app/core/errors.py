"""
Domain errors raised by the services.

Absent rows are never reported through exceptions: lookups, updates and
deletes on an unknown id return ``None`` or ``False`` and the caller
decides what that means.  The exceptions below cover the remaining
cases where a write must be refused before it touches a table.  They
derive from ``ValueError`` so the route layer maps them to HTTP 400
together with schema validation failures.
"""


class InvalidQuantityError(ValueError):
    """Raised when a cart row would end up with a quantity below one."""

    def __init__(self, quantity: int) -> None:
        super().__init__(f"Quantity must be at least 1, got {quantity}")
        self.quantity = quantity


class DuplicateUserError(ValueError):
    """Raised when a username or email is already taken."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(f"A user with {field} '{value}' already exists")
        self.field = field
        self.value = value
