"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Carries every message found while validating a submission so the
    interface can report them together.
    """

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


class NotAuthorizedError(DomainError):
    """Raised when the caller lacks the ownership token (or moderator rights)."""

    def __init__(self, resource: str, resource_id: str, action: str = "edit"):
        self.resource = resource
        self.resource_id = resource_id
        self.action = action
        super().__init__(f"Not authorized to {action} {resource} {resource_id}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidReactionError(DomainError):
    """Raised for reaction kinds outside the fixed set."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid reaction kind: {value}")


class ModerationDisabledError(DomainError):
    """Raised when moderation is used without a configured secret."""

    def __init__(self) -> None:
        super().__init__("Moderation is not configured")


class InvalidModerationSecretError(DomainError):
    """Raised when the submitted moderation secret does not match."""

    def __init__(self) -> None:
        super().__init__("Moderation secret does not match")
