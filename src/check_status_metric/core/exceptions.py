"""Exception hierarchy for the check status metric mutator."""


class MutatorError(Exception):
    """Base exception for all mutator failures."""


class ConfigError(MutatorError):
    """The mutator configuration is unusable."""


class TemplateError(MutatorError):
    """A template could not be parsed or evaluated.

    Raised by renderer adapters implementing TemplateRendererPort.
    """


class EventDecodeError(MutatorError, ValueError):
    """Inbound data is not a valid event."""


class MutationError(MutatorError):
    """A single event could not be mutated."""


class MissingCheckError(MutationError):
    """The event carries no check data."""

    def __init__(self, message: str = "event has no check data") -> None:
        super().__init__(message)


class TemplateRenderError(MutationError):
    """The metric name template failed to render for an event."""

    def __init__(self, cause: TemplateError) -> None:
        super().__init__(f"failed to evaluate template: {cause}")
        self.cause = cause
