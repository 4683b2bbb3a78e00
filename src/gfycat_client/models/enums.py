"""Integer-coded enumerations used by Gfycat records.

The two enumerations are encoded differently on the wire: ``nsfw`` is a
string-wrapped code (``"0"``) while ``published`` is a bare integer (``1``).
Each has its own codec so the asymmetry survives a round trip.
"""

from __future__ import annotations

from enum import IntEnum

from gfycat_client.models.codecs import IntEnumCodec, StringifiedIntEnumCodec


class ContentSafety(IntEnum):
    """Content-safety classification (the provider's ``nsfw`` field).

    Code 2 is not assigned by the provider.
    """

    CLEAN = 0
    ADULT = 1
    POTENTIALLY_OFFENSIVE = 3


class PublicationState(IntEnum):
    """Whether an item is published (the provider's ``published`` field)."""

    NO = 0
    YES = 1


CONTENT_SAFETY_CODEC: StringifiedIntEnumCodec[ContentSafety] = StringifiedIntEnumCodec(
    ContentSafety
)
PUBLICATION_STATE_CODEC: IntEnumCodec[PublicationState] = IntEnumCodec(PublicationState)

WireContentSafety = CONTENT_SAFETY_CODEC.annotated()
"""``ContentSafety`` field transmitted as a string-wrapped integer."""

WirePublicationState = PUBLICATION_STATE_CODEC.annotated()
"""``PublicationState`` field transmitted as a bare JSON integer."""
