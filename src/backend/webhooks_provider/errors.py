"""Errors raised by the webhooks integration resource."""


class IntegrationError(Exception):
    """Base exception for webhooks integration errors."""

    operation: str = ""

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        if operation is not None:
            self.operation = operation


class TranslationError(IntegrationError):
    """Desired-state input could not be turned into a remote configuration."""

    operation = "translate"


class RemoteAPIError(IntegrationError):
    """The remote service rejected a request or could not be reached."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        status_code: int | None = None,
        body: str = "",
    ):
        super().__init__(message, operation)
        self.status_code = status_code
        self.body = body


class NotFoundError(RemoteAPIError):
    """The remote webhooks integration does not exist."""

    pass


class LifecycleError(IntegrationError):
    """A lifecycle operation failed against the remote service."""

    def __init__(self, cause: Exception | str, operation: str | None = None):
        op = operation or self.operation
        super().__init__(f"{op} failed: {cause}", op)
        self.cause = cause


class CreateError(LifecycleError):
    operation = "create"


class ReadError(LifecycleError):
    operation = "read"


class UpdateError(LifecycleError):
    operation = "update"


class DeleteError(LifecycleError):
    operation = "delete"


class ResourceImportError(LifecycleError):
    """Raised when an existing integration cannot be adopted into local state."""

    operation = "import"
