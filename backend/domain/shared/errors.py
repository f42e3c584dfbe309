"""Domain error hierarchy.

Services raise these; the API layer maps them to HTTP status codes.
"""


class DomainError(Exception):
    """Base exception for all domain errors."""

    code = "domain_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(DomainError):
    """Referenced entity does not exist."""

    code = "not_found"

    def __init__(self, resource: str, identifier: str):
        """Initialize with resource kind and identifier.

        Args:
            resource: Human readable resource name (e.g. "Ingredient")
            identifier: Business identifier that was looked up
        """
        self.resource = resource
        self.identifier = identifier
        super().__init__(f'{resource} with ID "{identifier}" not found')


class ForbiddenError(DomainError):
    """Actor is not allowed to perform the operation."""

    code = "forbidden"

    def __init__(self, reason: str):
        """Initialize with reason.

        Args:
            reason: Human-readable reason for the refusal
        """
        self.reason = reason
        super().__init__(reason)


class InvalidInputError(DomainError):
    """Malformed or out-of-range input caught before persistence."""

    code = "bad_request"

    def __init__(self, field: str, reason: str):
        """Initialize with offending field and reason.

        Args:
            field: Name of the invalid field
            reason: Why the value was rejected
        """
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}")
