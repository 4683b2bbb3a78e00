"""Unit tests for the decoded record models and the envelope unwrap rule.

Covers:
- ContentItem decodes the recorded fixture field-for-field
- wire names (camelCase, plus the snake_case ``content_urls``) on input and
  output, and the provider encodings reproduced on serialisation
- records are immutable, ignore unknown provider fields and do not coerce
  scalar fields from other JSON types
- width/height/size bounds on ContentVariant
- PublicUser decodes independently of the embedded UserSummary
- envelope unwrap: payload returned unchanged, missing key rejected
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

import pytest
from pydantic import ValidationError

from gfycat_client.models import (
    ContentItem,
    ContentSafety,
    ContentVariant,
    ErrorDetail,
    PublicationState,
    PublicUser,
    UserSummary,
)
from gfycat_client.models.envelope import envelope_model, unwrap

# ---------------------------------------------------------------------------
# ContentItem
# ---------------------------------------------------------------------------


class TestContentItem:
    def _item(self, item_payload: dict[str, Any]) -> ContentItem:
        return ContentItem.model_validate(item_payload["gfyItem"])

    def test_scalar_fields_match_fixture(self, item_payload: dict[str, Any]) -> None:
        item = self._item(item_payload)

        assert item.avg_color == "#B99A65"
        assert item.create_date == datetime(2020, 6, 21, 11, 35, 59, tzinfo=timezone.utc)
        assert item.description == ""
        assert item.frame_rate == pytest.approx(24.675325)
        assert item.gfy_id == "enormousdescriptiveindri"
        assert item.gfy_name == "EnormousDescriptiveIndri"
        assert item.gfy_number == 504_490_887
        assert item.gfy_slug == "terrible-haircut-mistake-devine-mirror-color-wrong"
        assert item.has_audio is True
        assert item.has_transparency is False
        assert (item.width, item.height) == (940, 600)
        assert item.language_text == ""
        assert item.md5 == "86b4a541321b0985c4f30e2997a6594f"
        assert item.num_frames == 38.0
        assert item.sitename == "gfycat"
        assert item.title == "OMG"

    def test_enumerations_decode(self, item_payload: dict[str, Any]) -> None:
        item = self._item(item_payload)

        assert item.nsfw is ContentSafety.CLEAN
        assert item.published is PublicationState.YES

    def test_tag_lists(self, item_payload: dict[str, Any]) -> None:
        item = self._item(item_payload)

        assert item.tags == [
            "adam", "bad", "color", "devine", "dye", "first", "god", "hair", "haircut", "met",
            "mirror", "mistake", "my", "oh", "omg", "oops", "terrible", "we", "when", "wrong",
        ]
        assert item.language_categories == ["trending"]

    def test_content_variants(self, item_payload: dict[str, Any]) -> None:
        item = self._item(item_payload)
        thumbs = "https://thumbs.gfycat.com/EnormousDescriptiveIndri"
        giant = "https://giant.gfycat.com/EnormousDescriptiveIndri"

        # The provider reports 0x0 for renditions whose size it does not know (webp).
        assert item.content_urls == {
            "100pxGif": ContentVariant(
                height=217, size=870_224, url=f"{thumbs}-max-1mb.gif", width=340
            ),
            "largeGif": ContentVariant(
                height=383, size=3_675_771, url=f"{thumbs}-size_restricted.gif", width=600
            ),
            "max1mbGif": ContentVariant(
                height=217, size=870_224, url=f"{thumbs}-max-1mb.gif", width=340
            ),
            "max2mbGif": ContentVariant(
                height=306, size=1_698_034, url=f"{thumbs}-small.gif", width=480
            ),
            "max5mbGif": ContentVariant(
                height=383, size=3_675_771, url=f"{thumbs}-size_restricted.gif", width=600
            ),
            "mobile": ContentVariant(
                height=408, size=64_812, url=f"{thumbs}-mobile.mp4", width=640
            ),
            "mobilePoster": ContentVariant(
                height=408, size=17_164, url=f"{thumbs}-mobile.jpg", width=640
            ),
            "mp4": ContentVariant(height=600, size=652_935, url=f"{giant}.mp4", width=940),
            "webm": ContentVariant(height=600, size=96_156, url=f"{giant}.webm", width=940),
            "webp": ContentVariant(height=0, size=131_840, url=f"{thumbs}.webp", width=0),
        }

    def test_embedded_user_summary(self, item_payload: dict[str, Any]) -> None:
        item = self._item(item_payload)

        assert item.user_data == UserSummary(
            name="Deus GIF Machina",
            profile_image_url=(
                "https://profiles.gfycat.com/"
                "f78474b28ad6ace82bc702e4fdcdd12bb2a5416ecf62e73967811f63b3fcadc5.png"
            ),
            url="https://gfycat.com/@gifmachina",
            username="gifmachina",
            verified=False,
        )

    def test_serialises_with_provider_encodings(self, item_payload: dict[str, Any]) -> None:
        """to_wire() restores camelCase names, the quoted nsfw code and the string number."""
        wire = self._item(item_payload).to_wire()

        assert wire["avgColor"] == "#B99A65"
        assert wire["nsfw"] == "0"
        assert wire["published"] == 1
        assert wire["gfyNumber"] == "504490887"
        assert wire["createDate"] == 1_592_739_359
        assert "content_urls" in wire
        assert wire["content_urls"]["mp4"]["size"] == 652_935
        assert wire["userData"]["profileImageUrl"].endswith(".png")

    def test_wire_form_decodes_back_to_equal_item(self, item_payload: dict[str, Any]) -> None:
        item = self._item(item_payload)

        assert ContentItem.model_validate_json(json.dumps(item.to_wire())) == item

    def test_unknown_provider_fields_are_ignored(self, item_payload: dict[str, Any]) -> None:
        item = self._item(item_payload)

        assert not hasattr(item, "views")
        assert not hasattr(item, "gatekeeper")

    def test_records_are_immutable(self, item_payload: dict[str, Any]) -> None:
        item = self._item(item_payload)

        with pytest.raises(ValidationError):
            item.title = "changed"  # type: ignore[misc]

    def test_bare_gfy_number_fails(self, item_payload: dict[str, Any]) -> None:
        raw = {**item_payload["gfyItem"], "gfyNumber": 504_490_887}

        with pytest.raises(ValidationError) as exc_info:
            ContentItem.model_validate(raw)

        assert exc_info.value.errors()[0]["loc"] == ("gfyNumber",)

    def test_unassigned_nsfw_code_fails(self, item_payload: dict[str, Any]) -> None:
        raw = {**item_payload["gfyItem"], "nsfw": "2"}

        with pytest.raises(ValidationError):
            ContentItem.model_validate(raw)

    @pytest.mark.parametrize("nsfw", ["1", "3"])
    def test_other_nsfw_codes_decode(self, item_payload: dict[str, Any], nsfw: str) -> None:
        raw = {**item_payload["gfyItem"], "nsfw": nsfw}

        assert ContentItem.model_validate(raw).nsfw == ContentSafety(int(nsfw))

    @pytest.mark.parametrize(
        ("field", "value"), [("height", "600"), ("hasAudio", 1), ("md5", None), ("numFrames", "38")]
    )
    def test_scalar_fields_are_not_coerced(
        self, item_payload: dict[str, Any], field: str, value: Any
    ) -> None:
        raw = {**item_payload["gfyItem"], field: value}

        with pytest.raises(ValidationError) as exc_info:
            ContentItem.model_validate(raw)

        assert exc_info.value.errors()[0]["loc"] == (field,)

    def test_negative_zero_nsfw_fails(self, item_payload: dict[str, Any]) -> None:
        raw = {**item_payload["gfyItem"], "nsfw": "-0"}

        with pytest.raises(ValidationError):
            ContentItem.model_validate(raw)

    def test_missing_required_field_fails(self, item_payload: dict[str, Any]) -> None:
        raw = dict(item_payload["gfyItem"])
        del raw["userData"]

        with pytest.raises(ValidationError):
            ContentItem.model_validate(raw)


# ---------------------------------------------------------------------------
# ContentVariant bounds
# ---------------------------------------------------------------------------


class TestContentVariant:
    def test_negative_dimensions_are_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ContentVariant.model_validate({"height": -1, "size": 1, "url": "u", "width": 1})

    def test_size_accepts_full_u64_range(self) -> None:
        variant = ContentVariant.model_validate(
            {"height": 1, "size": 2**64 - 1, "url": "u", "width": 1}
        )

        assert variant.size == 2**64 - 1

    def test_size_above_u64_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ContentVariant.model_validate({"height": 1, "size": 2**64, "url": "u", "width": 1})


# ---------------------------------------------------------------------------
# PublicUser / ErrorDetail
# ---------------------------------------------------------------------------


class TestPublicUser:
    def test_decodes_fixture(self, user_payload: dict[str, Any]) -> None:
        user = PublicUser.model_validate(user_payload)

        assert user.userid == "gifmachina"
        assert user.username == "gifmachina"
        assert user.name == "Deus GIF Machina"
        assert user.create_date == datetime.fromtimestamp(1_516_653_405, tz=timezone.utc)
        assert user.published_gfycats == 2871
        assert user.followers == 1186
        assert user.following == 0
        assert user.views == 10_283_734
        assert user.iframe_profile_image_visible is True
        assert user.published_albums == 0

    def test_optional_fields_default_to_none(self, user_payload: dict[str, Any]) -> None:
        raw = {
            k: v
            for k, v in user_payload.items()
            if k not in ("description", "profileUrl", "publishedAlbums")
        }

        user = PublicUser.model_validate(raw)

        assert user.description is None
        assert user.profile_url is None
        assert user.published_albums is None

    def test_is_not_a_user_summary(self, user_payload: dict[str, Any]) -> None:
        """The standalone profile and the embedded summary are separate types."""
        user = PublicUser.model_validate(user_payload)

        assert not isinstance(user, UserSummary)
        assert not issubclass(UserSummary, PublicUser)


class TestErrorDetail:
    def test_reads_error_message(self, not_found_payload: dict[str, Any]) -> None:
        detail = ErrorDetail.model_validate(not_found_payload)

        assert detail.error_message == "not_a_valid_gfyid does not exist."

    def test_missing_message_fails(self) -> None:
        with pytest.raises(ValidationError):
            ErrorDetail.model_validate({"message": "wrong key"})


# ---------------------------------------------------------------------------
# Envelope unwrap
# ---------------------------------------------------------------------------


class TestEnvelope:
    def test_unwrap_returns_inner_payload(self, item_payload: dict[str, Any]) -> None:
        body = json.dumps(item_payload).encode()

        item = unwrap(body, ContentItem, "gfyItem")

        assert item == ContentItem.model_validate(item_payload["gfyItem"])

    def test_missing_key_fails(self, item_payload: dict[str, Any]) -> None:
        body = json.dumps({"gfycat": item_payload["gfyItem"]})

        with pytest.raises(ValidationError):
            unwrap(body, ContentItem, "gfyItem")

    def test_bare_payload_with_no_key(self, user_payload: dict[str, Any]) -> None:
        user = unwrap(json.dumps(user_payload), PublicUser, None)

        assert user.username == "gifmachina"

    def test_invalid_json_fails(self) -> None:
        with pytest.raises(ValidationError):
            unwrap(b"<html>oops</html>", ContentItem, "gfyItem")

    def test_envelope_model_is_cached_per_payload_and_key(self) -> None:
        assert envelope_model(ContentItem, "gfyItem") is envelope_model(ContentItem, "gfyItem")
        assert envelope_model(ContentItem, "gfyItem") is not envelope_model(ContentItem, "item")
