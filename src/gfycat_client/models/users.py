"""Public user profile returned by ``GET /v1/users/{userId}``."""

from __future__ import annotations

from gfycat_client.models.base import U64, Bool, GfycatModel, Str
from gfycat_client.models.codecs import EpochSeconds


class PublicUser(GfycatModel):
    """A user's public profile.

    Shares ``username``, ``name``, ``url``, ``profile_image_url`` and
    ``verified`` with :class:`~gfycat_client.models.items.UserSummary`, but
    the two are independent records: the summary is the provider's snapshot
    embedded in an item, this is the standalone lookup.

    Attributes:
        userid: Provider user identifier.
        username: Login name.
        name: Display name.
        url: Profile page URL.
        profile_image_url: Avatar URL.
        verified: Whether the account is verified.
        create_date: Account creation time (UTC).
        published_gfycats: Number of published items.
        followers: Follower count.
        following: Number of accounts followed.
        views: Aggregate view count.
        iframe_profile_image_visible: Whether the avatar is shown in embeds.
        description: Profile text, when set.
        profile_url: User-supplied external link, when set.
        published_albums: Number of published albums, when reported.
    """

    userid: Str
    username: Str
    name: Str
    url: Str
    profile_image_url: Str
    verified: Bool
    create_date: EpochSeconds
    published_gfycats: U64
    followers: U64
    following: U64
    views: U64
    iframe_profile_image_visible: Bool
    description: Str | None = None
    profile_url: Str | None = None
    published_albums: U64 | None = None
