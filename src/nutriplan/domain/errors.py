"""Error taxonomy shared by services, adapters and the HTTP layer."""


class NutriplanError(Exception):
    """Base error carrying a user-displayable reason."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class ValidationError(NutriplanError):
    """Input rejected before any row was written."""


class NotFoundError(NutriplanError):
    """A referenced plan, item or template does not exist."""


class ConflictError(NutriplanError):
    """A write collided with a uniqueness constraint."""


class StoreError(NutriplanError):
    """The underlying record store failed."""
