"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class MaxNestingDepthError(BusinessRuleViolationError):
    """Raised when a reply would sit deeper than topic -> reply -> sub-reply."""

    def __init__(self, max_depth: int = 2):
        self.max_depth = max_depth
        super().__init__(f"Maximum nesting depth of {max_depth} levels exceeded")


class RateLimitError(DomainError):
    """Raised when the spam guard rejects a post.

    The reason is shown to the client verbatim.
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
