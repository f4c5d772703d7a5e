"""Content-part transforms shared by both conversion directions.

Content arrives either as a plain string (shorthand for one text fragment)
or as an ordered list of typed fragments. Each transform maps fragments
one-to-one (or one-to-zero when a required field does not resolve) and
raises :class:`UnsupportedContentTypeError` for fragment types it does not
know.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from letta_provider.core.interface.errors import UnsupportedContentTypeError
from letta_provider.core.interface.models import (
    TOOL_PART_PREFIX,
    FileUIPart,
    TextContentPart,
    TextUIPart,
)

logger = logging.getLogger(__name__)

IMAGE_MEDIA_TYPE = "image/*"
AUDIO_MEDIA_TYPE = "audio/*"


def to_ui_parts(content: str | Sequence[Any]) -> list[TextUIPart | FileUIPart]:
    """Convert platform message content into UI text/file parts.

    Recognized fragment types:

    - ``text`` becomes a :class:`TextUIPart`.
    - ``image_url`` becomes a :class:`FileUIPart` (``image/*``). The URL is
      the fragment's nested ``url``, or the ``image_url`` value itself when
      that is a string.
    - ``input_audio`` becomes a :class:`FileUIPart` (``audio/*``) from its
      nested ``url``.

    Image and audio fragments without a usable URL are dropped.
    """
    parts: list[TextUIPart | FileUIPart] = []
    for fragment in _fragments(content):
        part_type = _get(fragment, "type")
        if part_type == "text":
            text = _get(fragment, "text")
            if isinstance(text, str):
                parts.append(TextUIPart(text=text))
            else:
                logger.debug("Dropping text fragment without text")
        elif part_type == "image_url":
            image = _get(fragment, "image_url", "imageUrl")
            url = _get(image, "url")
            if url is None:
                url = image
            if isinstance(url, str):
                parts.append(FileUIPart(url=url, media_type=IMAGE_MEDIA_TYPE))
            else:
                logger.debug("Dropping image_url fragment without url")
        elif part_type == "input_audio":
            audio = _get(fragment, "input_audio", "inputAudio")
            url = _get(audio, "url")
            if isinstance(url, str):
                parts.append(FileUIPart(url=url, media_type=AUDIO_MEDIA_TYPE))
            else:
                logger.debug("Dropping input_audio fragment without url")
        else:
            raise UnsupportedContentTypeError(part_type)
    return parts


def to_text_content(content: str | Sequence[Any]) -> list[TextContentPart]:
    """Normalize prompt content into the platform's text-only fragments.

    ``text`` parts pass through; parts whose type starts with ``tool-`` are
    dropped since tool artifacts cannot be submitted again. Anything else
    raises :class:`UnsupportedContentTypeError`.
    """
    parts: list[TextContentPart] = []
    for fragment in _fragments(content):
        part_type = _get(fragment, "type")
        if part_type == "text":
            text = _get(fragment, "text")
            if isinstance(text, str):
                parts.append(TextContentPart(text=text))
            else:
                logger.debug("Dropping text part without text")
        elif isinstance(part_type, str) and part_type.startswith(TOOL_PART_PREFIX):
            logger.debug("Dropping %s part from outbound content", part_type)
        else:
            raise UnsupportedContentTypeError(part_type)
    return parts


def _fragments(content: str | Sequence[Any]) -> Sequence[Any]:
    if isinstance(content, str):
        return [{"type": "text", "text": content}]
    if not isinstance(content, Sequence):
        raise UnsupportedContentTypeError(type(content).__name__)
    return content


def _get(obj: Any, *keys: str) -> Any:
    """Read the first present key from a mapping or attribute from a model."""
    for key in keys:
        if isinstance(obj, Mapping):
            value = obj.get(key)  # pyright: ignore[reportUnknownMemberType]
        else:
            value = getattr(obj, key, None)
        if value is not None:
            return value
    return None
