"""Unit tests for response models."""

import pytest


class TestBaseModel:
    """Tests for dataclass decoding."""

    def test_missing_keys_keep_defaults(self):
        """Test that absent keys keep their zero values."""
        from wavix.models import Profile

        profile = Profile.from_dict({"id": 7, "first_name": "Jane"})

        assert profile.id == 7
        assert profile.first_name == "Jane"
        assert profile.email == ""
        assert profile.default_destinations == []

    def test_none_yields_zero_value(self):
        """Test decoding None."""
        from wavix.models import AccountSettings

        settings = AccountSettings.from_dict(None)

        assert settings.balance == ""
        assert settings.global_limits.max_call_duration == 0

    def test_unknown_keys_ignored(self):
        """Test extra keys in the response are ignored."""
        from wavix.models import SuccessResponse

        assert SuccessResponse.from_dict({"success": True, "extra": 1}).success is True

    def test_renamed_keys(self):
        """Test fields stored under a different JSON key."""
        from wavix.models import Call, SipTrunkConfiguration, TranscriptionTurn

        call = Call.from_dict(
            {
                "uuid": "c-1",
                "from": "12025550100",
                "to": "12025550199",
                "call_started": "2024-05-01T10:00:00Z",
                "call_answered": "2024-05-01T10:00:05Z",
            }
        )
        assert call.id == "c-1"
        assert call.from_number == "12025550100"
        assert call.answered_at == "2024-05-01T10:00:05Z"

        trunk = SipTrunkConfiguration.from_dict(
            {"name": "trunk-1", "callerid": "12025550100", "didinfo_enabled": True}
        )
        assert trunk.name == "trunk-1"
        assert trunk.caller_id == "12025550100"
        assert trunk.did_info_enabled is True

        turn = TranscriptionTurn.from_dict({"s": "0.5", "e": "2.25", "text": "Hello"})
        assert (turn.start, turn.end) == ("0.5", "2.25")

    def test_nested_models(self):
        """Test nested objects and lists are decoded."""
        from wavix.models import Did, DidDestination

        did = Did.from_dict(
            {
                "id": 1,
                "number": "12025550100",
                "destination": [{"id": 3, "destination": "sip:a@b", "transport": 1}],
                "documents": [],
            }
        )

        assert isinstance(did.destination[0], DidDestination)
        assert did.destination[0].destination == "sip:a@b"
        assert did.documents == []

    def test_optional_nested_model(self):
        """Test an optional nested object stays None when absent."""
        from wavix.models import SipTrunk, SpeechAnalyticsCall

        assert SipTrunk.from_dict({"id": 1}).host_request is None

        call = SpeechAnalyticsCall.from_dict(
            {"uuid": "u", "from": "1", "transcription": {"uuid": "t", "url": "https://t"}}
        )
        assert call.from_number == "1"
        assert call.transcription.url == "https://t"

    def test_wrong_shape(self):
        """Test a value of the wrong shape is rejected."""
        from wavix.models import CartContent, Profile

        with pytest.raises(TypeError):
            Profile.from_dict(["not", "an", "object"])

        with pytest.raises(TypeError):
            CartContent.from_dict({"dids": {"id": 1}})

    @pytest.mark.parametrize(
        "model,data",
        [
            ("Pagination", {"current_page": "2"}),
            ("Pagination", {"total": True}),
            ("CallEvent", {"uuid": 5}),
            ("CallEvent", {"machine_detected": "false"}),
            ("ShortLinkMetric", {"latitude": "38.9"}),
            ("CartDid", {"require_docs": "address"}),
            ("CartDid", {"require_docs": [1]}),
            ("MessageBody", {"media": "https://example.com/cat.jpg"}),
            ("Transcription", {"transcription": []}),
        ],
    )
    def test_scalar_type_mismatch(self, model, data):
        """Test a field of the wrong JSON type is rejected."""
        from wavix import models

        with pytest.raises(TypeError) as exc_info:
            getattr(models, model).from_dict(data)

        assert repr(next(iter(data))) in str(exc_info.value)

    def test_scalar_types_accepted(self):
        """Test matching JSON types and nulls decode."""
        from wavix.models import Message, Profile, ShortLinkMetric

        metric = ShortLinkMetric.from_dict({"latitude": 38, "longitude": -77.5})
        assert (metric.latitude, metric.longitude) == (38, -77.5)

        assert Profile.from_dict({"first_name": None}).first_name == ""

        message = Message.from_dict({"sent_at": None, "tag": "promo"})
        assert message.sent_at is None
        assert message.tag == "promo"

    def test_to_json(self):
        """Test serializing a model."""
        import json
        from wavix.models import ShortLink

        assert json.loads(ShortLink(short_link="https://wvx.io/a").to_json()) == {
            "short_link": "https://wvx.io/a"
        }


class TestEnums:
    """Tests for enumerations."""

    def test_transaction_types(self):
        """Test transaction type codes."""
        from wavix.models import TransactionType

        assert TransactionType(6) is TransactionType.CALL
        assert TransactionType.ADJUSTMENTS_IN == 45
        assert 13 not in {t.value for t in TransactionType}
        assert len(TransactionType) == 45

    def test_voices(self):
        """Test TTS voice names."""
        from wavix.models import TtsVoice

        assert TtsVoice("Joanna") is TtsVoice.JOANNA
        assert len(TtsVoice) == 17


class TestCallEvent:
    """Tests for call event decoding."""

    def test_status_event(self):
        """Test a status event without payload."""
        from wavix.models import CallEvent

        event = CallEvent.from_dict(
            {
                "uuid": "c-1",
                "event_type": "answered",
                "event_time": "2024-05-01T10:00:05Z",
                "from": "12025550100",
                "to": "12025550199",
                "machine_detected": False,
                "tag": "campaign-a",
            }
        )

        assert event.event_type == "answered"
        assert event.from_number == "12025550100"
        assert event.event_payload is None
        assert event.tag == "campaign-a"

    def test_digits_event(self):
        """Test an in-call event carrying collected digits."""
        from wavix.models import CallEvent, DigitsAndReasonEventData

        event = CallEvent.from_dict(
            {
                "uuid": "c-1",
                "event_type": "in_call_event",
                "event_payload": {
                    "in_call_event": "collect",
                    "in_call_event_data": {"digits": "1234", "reason": "max_digits"},
                },
            }
        )

        data = event.event_payload.in_call_event_data
        assert isinstance(data, DigitsAndReasonEventData)
        assert data.digits == "1234"
        assert data.reason == "max_digits"

    def test_playback_event(self):
        """Test an in-call event referencing a playback."""
        from wavix.models import CallEventPayload, PlaybackIdEventData

        payload = CallEventPayload.from_dict(
            {"in_call_event": "play_finished", "in_call_event_data": {"playback_id": "pb-9"}}
        )

        assert payload.in_call_event_data == PlaybackIdEventData(playback_id="pb-9")

    def test_both_variants_prefers_digits(self):
        """Test data matching both variants decodes as digits."""
        from wavix.models import decode_in_call_event_data, DigitsAndReasonEventData

        data = decode_in_call_event_data(
            {"digits": "1", "reason": "timeout", "playback_id": "pb-1"}
        )

        assert isinstance(data, DigitsAndReasonEventData)

    @pytest.mark.parametrize(
        "data",
        [
            {"digits": "1"},
            {"playback_id": 5},
            {},
            None,
            "pb-1",
        ],
    )
    def test_unknown_event_data(self, data):
        """Test event data matching no variant."""
        from wavix.models import decode_in_call_event_data

        with pytest.raises(ValueError, match="unknown in_call_event_data type"):
            decode_in_call_event_data(data)

    def test_non_string_event_name(self):
        """Test a non-string in_call_event is rejected."""
        from wavix.models import CallEventPayload

        with pytest.raises(TypeError):
            CallEventPayload.from_dict(
                {"in_call_event": 1, "in_call_event_data": {"playback_id": "pb"}}
            )
