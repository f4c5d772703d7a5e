"""Error types for message conversion and the provider glue."""


class ConversionError(Exception):
    """Base error for all message-format conversion failures."""


class UnsupportedContentTypeError(ConversionError):
    """A content fragment's ``type`` is not recognized by the active transform."""

    def __init__(self, content_type: object) -> None:
        self.content_type = content_type
        super().__init__(f"Content type {content_type} not supported")


class UnsupportedRoleError(ConversionError):
    """A prompt message's role cannot be submitted to the platform as new input."""

    def __init__(self, role: object, reason: str = "") -> None:
        self.role = role
        self.reason = reason
        msg = f"Message role is not supported: {role}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class ProviderError(Exception):
    """Base error for the provider layer around the converters."""


class LettaAPIError(ProviderError):
    """A request to the Letta REST API failed."""

    def __init__(self, detail: str = "", status_code: int | None = None) -> None:
        self.detail = detail
        self.status_code = status_code
        msg = "Letta API error"
        if status_code is not None:
            msg += f" [{status_code}]"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class MissingAgentError(ProviderError):
    """No agent id was supplied in the provider options."""

    def __init__(self) -> None:
        super().__init__(
            "No Letta agent id provided. "
            "Pass provider_options={'letta': {'agent': {'id': '<agent-id>'}}}."
        )


class ModelParametersError(ProviderError):
    """The provider callable was invoked with model parameters."""

    def __init__(self) -> None:
        super().__init__(
            "The Letta provider does not accept model parameters. "
            "Model configuration is managed through your Letta agents."
        )
