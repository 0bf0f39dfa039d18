"""Client-facing errors raised while handling an automata request."""

INVALID_BODY_MESSAGE = "Invalid request body."
TASK_FIELD_MESSAGE = "Field 'task' is required and must be a non-empty string."


class AutomataError(Exception):
    """Base class for rejections that map onto an HTTP error response."""

    status_code: int = 400
    default_message: str = INVALID_BODY_MESSAGE

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_payload(self) -> dict[str, str]:
        return {"error": self.message}


class InvalidRequestBody(AutomataError):
    """Body is not JSON, or not a JSON object."""


class TaskValidationError(AutomataError):
    """The ``task`` field is missing, not a string, or blank."""

    default_message = TASK_FIELD_MESSAGE
