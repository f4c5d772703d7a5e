"""Tests for the conversion and provider error hierarchy."""

from letta_provider.core.interface.errors import (
    ConversionError,
    LettaAPIError,
    MissingAgentError,
    ModelParametersError,
    ProviderError,
    UnsupportedContentTypeError,
    UnsupportedRoleError,
)


class TestErrorHierarchy:
    def test_conversion_errors(self) -> None:
        assert issubclass(UnsupportedContentTypeError, ConversionError)
        assert issubclass(UnsupportedRoleError, ConversionError)

    def test_provider_errors(self) -> None:
        assert issubclass(LettaAPIError, ProviderError)
        assert issubclass(MissingAgentError, ProviderError)
        assert issubclass(ModelParametersError, ProviderError)

    def test_families_are_separate(self) -> None:
        assert not issubclass(ConversionError, ProviderError)


class TestUnsupportedContentTypeError:
    def test_attributes(self) -> None:
        err = UnsupportedContentTypeError("video_url")
        assert err.content_type == "video_url"
        assert str(err) == "Content type video_url not supported"


class TestUnsupportedRoleError:
    def test_with_reason(self) -> None:
        err = UnsupportedRoleError("assistant", "managed by the agent")
        assert err.role == "assistant"
        assert "assistant" in str(err)
        assert "managed by the agent" in str(err)

    def test_without_reason(self) -> None:
        err = UnsupportedRoleError("developer")
        assert str(err) == "Message role is not supported: developer"


class TestLettaAPIError:
    def test_with_status(self) -> None:
        err = LettaAPIError("not found", status_code=404)
        assert err.status_code == 404
        assert "[404]" in str(err)
        assert "not found" in str(err)

    def test_without_detail(self) -> None:
        assert str(LettaAPIError()) == "Letta API error"
