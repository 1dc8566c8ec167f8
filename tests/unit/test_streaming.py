"""Unit tests for the call event stream."""

import asyncio
import json
import logging
from unittest.mock import AsyncMock, patch

import pytest
from websockets.exceptions import ConnectionClosedError


def event_frame(uuid, event_type="ringing", **extra):
    return json.dumps({"uuid": uuid, "event_type": event_type, **extra})


class FakeWebSocket:
    """Socket yielding fixed frames, then staying open until closed."""

    def __init__(self, frames, drop=False):
        self.frames = frames
        self.drop = drop
        self.exhausted = asyncio.Event()
        self.closed = asyncio.Event()
        self.close = AsyncMock(side_effect=self._close)

    async def _close(self):
        self.closed.set()

    async def _iterate(self):
        for frame in self.frames:
            yield frame
        self.exhausted.set()
        if self.drop:
            raise ConnectionClosedError(None, None)
        await self.closed.wait()

    def __aiter__(self):
        return self._iterate()


@pytest.fixture
def stream():
    from wavix.config import ClientConfig
    from wavix.streaming import CallEventStream

    return CallEventStream(ClientConfig(appid="test-appid"))


class TestStreamSetup:
    """Tests for stream configuration."""

    def test_url(self, stream):
        """Test the socket URL follows the API host."""
        assert stream.url == "wss://api.wavix.com/sip?appid=test-appid"

    def test_url_custom_host(self):
        """Test the socket URL for a custom base URL."""
        from wavix.config import ClientConfig
        from wavix.streaming import CallEventStream

        stream = CallEventStream(ClientConfig(appid="a", base_url="http://localhost:8080"))

        assert stream.url == "wss://localhost:8080/sip?appid=a"

    def test_url_encodes_appid(self):
        """Test reserved characters in the app id are percent-encoded."""
        from wavix.config import ClientConfig
        from wavix.streaming import CallEventStream

        stream = CallEventStream(ClientConfig(appid="a&b+c#d"))

        assert stream.url == "wss://api.wavix.com/sip?appid=a%26b%2Bc%23d"

    def test_url_without_host(self):
        """Test a base URL without host is rejected."""
        from wavix.config import ClientConfig
        from wavix.streaming import CallEventStream
        from wavix import WebSocketError

        stream = CallEventStream(ClientConfig(appid="a", base_url="not a url"))

        with pytest.raises(WebSocketError):
            stream.url

    def test_handlers(self, stream):
        """Test registering and removing handlers."""
        def handler(event):
            pass

        assert stream.on_event(handler) is handler
        stream.remove_handler(handler)
        stream.remove_handler(handler)

        assert stream._handlers == []

    def test_decode_event(self):
        """Test decoding a socket frame."""
        from wavix.streaming import decode_event

        event = decode_event(event_frame("c-1", "answered", **{"from": "12025550100"}))

        assert event.uuid == "c-1"
        assert event.from_number == "12025550100"

    @pytest.mark.parametrize("frame", ["not json", "[1, 2]"])
    def test_decode_invalid_frame(self, frame):
        """Test frames that are not call events."""
        from wavix.streaming import decode_event

        with pytest.raises((ValueError, TypeError)):
            decode_event(frame)


class TestStreamDelivery:
    """Tests for event delivery."""

    @pytest.mark.asyncio
    async def test_events_delivered_in_order(self, stream):
        """Test every handler sees every event in arrival order."""
        from wavix.streaming import StreamState

        fake = FakeWebSocket([event_frame("c-1"), event_frame("c-2"), event_frame("c-3")])
        seen_sync = []
        seen_async = []

        @stream.on_event
        def sync_handler(event):
            seen_sync.append(event.uuid)

        @stream.on_event
        async def async_handler(event):
            await asyncio.sleep(0)
            seen_async.append(event.uuid)

        with patch("wavix.streaming.websockets.connect", AsyncMock(return_value=fake)) as connect:
            await stream.connect()
            assert stream.state == StreamState.CONNECTED
            assert stream.connected
            await fake.exhausted.wait()
            await stream.disconnect()

        connect.assert_awaited_once_with("wss://api.wavix.com/sip?appid=test-appid")
        fake.close.assert_awaited_once()
        assert seen_sync == ["c-1", "c-2", "c-3"]
        assert seen_async == ["c-1", "c-2", "c-3"]
        assert stream.state == StreamState.DISCONNECTED

    @pytest.mark.asyncio
    async def test_in_call_event_data(self, stream):
        """Test in-call event data reaches handlers decoded."""
        from wavix import DigitsAndReasonEventData

        frame = event_frame(
            "c-1",
            "in_call_event",
            event_payload={
                "in_call_event": "collect",
                "in_call_event_data": {"digits": "42", "reason": "terminated"},
            },
        )
        fake = FakeWebSocket([frame])
        seen = []
        stream.on_event(seen.append)

        with patch("wavix.streaming.websockets.connect", AsyncMock(return_value=fake)):
            await stream.connect()
            await fake.exhausted.wait()
            await stream.disconnect()

        assert seen[0].event_payload.in_call_event_data == DigitsAndReasonEventData(
            digits="42", reason="terminated"
        )

    @pytest.mark.asyncio
    async def test_undecodable_frames_skipped(self, stream, caplog):
        """Test bad frames are logged and dropped."""
        bad_payload = event_frame(
            "c-bad",
            "in_call_event",
            event_payload={"in_call_event": "x", "in_call_event_data": {"unknown": "1"}},
        )
        wrong_type = json.dumps({"uuid": 5, "event_type": "ringing"})
        fake = FakeWebSocket(["{broken", bad_payload, wrong_type, event_frame("c-ok")])
        seen = []
        stream.on_event(lambda event: seen.append(event.uuid))

        with caplog.at_level(logging.WARNING, logger="wavix.streaming"):
            with patch("wavix.streaming.websockets.connect", AsyncMock(return_value=fake)):
                await stream.connect()
                await fake.exhausted.wait()
                await stream.disconnect()

        assert seen == ["c-ok"]
        assert caplog.text.count("Dropping undecodable call event") == 3

    @pytest.mark.asyncio
    async def test_handler_error_does_not_stop_delivery(self, stream, caplog):
        """Test a failing handler is logged and delivery continues."""
        fake = FakeWebSocket([event_frame("c-1"), event_frame("c-2")])
        seen = []

        @stream.on_event
        def broken(event):
            raise RuntimeError("handler bug")

        stream.on_event(lambda event: seen.append(event.uuid))

        with patch("wavix.streaming.websockets.connect", AsyncMock(return_value=fake)):
            await stream.connect()
            await fake.exhausted.wait()
            await stream.disconnect()

        assert seen == ["c-1", "c-2"]
        assert "handler bug" in caplog.text

    @pytest.mark.asyncio
    async def test_connection_lost(self, stream, caplog):
        """Test a dropped connection ends delivery and resets state."""
        from wavix.streaming import StreamState

        fake = FakeWebSocket([event_frame("c-1")], drop=True)
        seen = []
        stream.on_event(lambda event: seen.append(event.uuid))

        with caplog.at_level(logging.WARNING, logger="wavix.streaming"):
            with patch("wavix.streaming.websockets.connect", AsyncMock(return_value=fake)):
                await stream.connect()
                await stream._consumer_task

        assert seen == ["c-1"]
        assert stream.state == StreamState.DISCONNECTED
        assert "WebSocket connection closed" in caplog.text

        await stream.disconnect()

    @pytest.mark.asyncio
    async def test_reconnect_after_connection_lost(self, stream):
        """Test connecting again after the server closed the socket."""
        first = FakeWebSocket([event_frame("c-1")], drop=True)
        second = FakeWebSocket([event_frame("c-2")])
        seen = []
        stream.on_event(lambda event: seen.append(event.uuid))

        with patch(
            "wavix.streaming.websockets.connect", AsyncMock(side_effect=[first, second])
        ):
            await stream.connect()
            await stream._consumer_task
            await stream.connect()
            await second.exhausted.wait()
            await stream.disconnect()

        assert seen == ["c-1", "c-2"]

    @pytest.mark.asyncio
    async def test_disconnect_from_handler(self, stream):
        """Test a handler can close the stream."""
        fake = FakeWebSocket([event_frame("c-1", "completed")])
        done = asyncio.Event()

        @stream.on_event
        async def handler(event):
            if event.event_type == "completed":
                await stream.disconnect()
                done.set()

        with patch("wavix.streaming.websockets.connect", AsyncMock(return_value=fake)):
            await stream.connect()
            await asyncio.wait_for(done.wait(), timeout=1)

        assert not stream.connected
        fake.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_blocking_handler_does_not_stall_reads(self, stream):
        """Test a blocking sync handler runs off the loop while frames keep arriving."""
        import threading

        fake = FakeWebSocket([event_frame("c-1"), event_frame("c-2"), event_frame("c-3")])
        gate = threading.Event()
        released = []
        seen = []

        @stream.on_event
        def handler(event):
            if event.uuid == "c-1":
                released.append(gate.wait(timeout=2))
            seen.append(event.uuid)

        with patch("wavix.streaming.websockets.connect", AsyncMock(return_value=fake)):
            await stream.connect()
            await asyncio.wait_for(fake.exhausted.wait(), timeout=1)
            gate.set()
            await stream.disconnect()

        assert released == [True]
        assert seen == ["c-1", "c-2", "c-3"]

    @pytest.mark.asyncio
    async def test_disconnect_drains_queued_events(self, stream):
        """Test events read before disconnect still reach a slow handler."""
        uuids = [f"c-{i}" for i in range(1, 6)]
        fake = FakeWebSocket([event_frame(uuid) for uuid in uuids])
        seen = []

        @stream.on_event
        async def handler(event):
            await asyncio.sleep(0.05)
            seen.append(event.uuid)

        with patch("wavix.streaming.websockets.connect", AsyncMock(return_value=fake)):
            await stream.connect()
            await fake.exhausted.wait()
            assert len(seen) < len(uuids)
            await stream.disconnect()

        assert seen == uuids


class TestStreamConnection:
    """Tests for connection handling."""

    @pytest.mark.asyncio
    async def test_connect_failure(self, stream):
        """Test a failed handshake."""
        from wavix import WebSocketError
        from wavix.streaming import StreamState

        with patch(
            "wavix.streaming.websockets.connect",
            AsyncMock(side_effect=OSError("connection refused")),
        ):
            with pytest.raises(WebSocketError) as exc_info:
                await stream.connect()

        assert "connection refused" in exc_info.value.message
        assert stream.state == StreamState.DISCONNECTED

    @pytest.mark.asyncio
    async def test_connect_twice(self, stream):
        """Test connecting an open stream is rejected."""
        from wavix import WebSocketError

        fake = FakeWebSocket([])

        with patch("wavix.streaming.websockets.connect", AsyncMock(return_value=fake)):
            await stream.connect()
            with pytest.raises(WebSocketError, match="Already connected"):
                await stream.connect()
            await stream.disconnect()

    @pytest.mark.asyncio
    async def test_disconnect_when_not_connected(self, stream):
        """Test disconnecting a stream that never connected."""
        from wavix.streaming import StreamState

        await stream.disconnect()
        await stream.disconnect()

        assert stream.state == StreamState.DISCONNECTED
