"""Content item records returned by ``GET /v1/gfycats/{gfyId}``."""

from __future__ import annotations

from pydantic import Field

from gfycat_client.models.base import U32, U64, Bool, Float, GfycatModel, Str
from gfycat_client.models.codecs import EpochSeconds, StringifiedU64
from gfycat_client.models.enums import WireContentSafety, WirePublicationState


class ContentVariant(GfycatModel):
    """One rendition of an item (``mp4``, ``webm``, ``mobilePoster``, ...).

    Attributes:
        height: Pixel height.  ``0`` when the provider does not know it.
        size: Size in bytes.
        url: Download URL.
        width: Pixel width.  ``0`` when the provider does not know it.
    """

    height: U32
    size: U64
    url: Str
    width: U32


class UserSummary(GfycatModel):
    """Denormalised snapshot of the uploader embedded in a content item."""

    name: Str
    profile_image_url: Str
    url: Str
    username: Str
    verified: Bool


class ContentItem(GfycatModel):
    """A single Gfycat content item.

    Attributes:
        avg_color: Average colour as a ``#RRGGBB`` string.
        content_urls: Renditions keyed by provider-defined variant name.
        create_date: Upload time (UTC).
        description: Free-text description, may be empty.
        frame_rate: Frames per second.
        gfy_id: Lower-case opaque identifier.
        gfy_name: Human-readable CamelCase identifier.
        gfy_number: Large numeric identifier (string on the wire).
        gfy_slug: URL slug.
        has_audio: Whether any rendition carries audio.
        has_transparency: Whether the item has an alpha channel.
        height: Source pixel height.
        language_categories: Category tags in provider order.
        language_text: Free text of the language categories.
        md5: Hex digest of the source upload.
        nsfw: Content-safety classification (string-wrapped code on the wire).
        num_frames: Frame count.
        published: Publication state (bare integer on the wire).
        sitename: Site the item belongs to.
        tags: Free-text tags, unordered.
        title: Item title.
        user_data: The uploader, as embedded by the provider.
        width: Source pixel width.
    """

    avg_color: Str
    # The one snake_case key in the payload.
    content_urls: dict[str, ContentVariant] = Field(alias="content_urls")
    create_date: EpochSeconds
    description: Str
    frame_rate: Float
    gfy_id: Str
    gfy_name: Str
    gfy_number: StringifiedU64
    gfy_slug: Str
    has_audio: Bool
    has_transparency: Bool
    height: U32
    language_categories: list[Str]
    language_text: Str
    md5: Str
    nsfw: WireContentSafety
    num_frames: Float
    published: WirePublicationState
    sitename: Str
    tags: list[Str]
    title: Str
    user_data: UserSummary
    width: U32
