"""
Wavix Python SDK - Call Event Stream

This module provides the WebSocket stream delivering live call events.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Optional, Any, Callable, List
from enum import Enum
from urllib.parse import quote, urlsplit

import websockets

from wavix.config import ClientConfig, EVENTS_PATH
from wavix.exceptions import WebSocketError
from wavix.models import CallEvent

logger = logging.getLogger("wavix.streaming")


class StreamState(str, Enum):
    """Connection state of the event stream."""
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"


# Type alias for event handlers, sync or async
EventHandler = Callable[[CallEvent], Any]

# Marks the end of the event queue.
_CLOSED = object()


def decode_event(message: Any) -> CallEvent:
    """
    Decode a socket frame into a CallEvent.

    Raises:
        ValueError: If the frame is not JSON
        TypeError: If the JSON does not have the shape of a call event
    """
    data = json.loads(message)
    if not isinstance(data, dict):
        raise TypeError("call event must be a JSON object")
    return CallEvent.from_dict(data)


class CallEventStream:
    """
    WebSocket client for live call events.

    Frames are read by a receive task and queued in arrival order. A single
    consumer task hands every queued event to each registered handler, in
    registration order. The stream only receives: nothing is ever sent on
    the socket.

    Example:
        >>> stream = client.events
        >>>
        >>> @stream.on_event
        ... async def handle(event):
        ...     print(f"{event.uuid}: {event.event_type}")
        >>>
        >>> await stream.connect()
        >>> ...
        >>> await stream.disconnect()
    """

    def __init__(self, config: ClientConfig) -> None:
        self._config = config
        self._websocket: Optional[Any] = None
        self._handlers: List[EventHandler] = []
        self._queue: Optional[asyncio.Queue] = None
        self._reader_task: Optional[asyncio.Task] = None
        self._consumer_task: Optional[asyncio.Task] = None
        self.state = StreamState.DISCONNECTED

    @property
    def url(self) -> str:
        """
        Events socket URL derived from the API base URL.

        Raises:
            WebSocketError: If the base URL has no host
        """
        host = urlsplit(self._config.base_url).netloc
        if not host:
            raise WebSocketError(f"Invalid base URL: {self._config.base_url!r}")
        return f"wss://{host}{EVENTS_PATH}?appid={quote(self._config.appid, safe='')}"

    @property
    def connected(self) -> bool:
        return self.state == StreamState.CONNECTED

    def on_event(self, handler: EventHandler) -> EventHandler:
        """
        Register an event handler.

        Handlers may be plain functions, run in a worker thread, or
        coroutine functions. Can be used as a decorator.

        Args:
            handler: Callable receiving each CallEvent

        Returns:
            The handler, unchanged
        """
        self._handlers.append(handler)
        return handler

    def remove_handler(self, handler: EventHandler) -> None:
        """Remove a registered handler."""
        if handler in self._handlers:
            self._handlers.remove(handler)

    async def connect(self) -> None:
        """
        Open the events socket and start delivering events.

        Raises:
            WebSocketError: If already connected, the base URL has no host,
                or the handshake fails
        """
        if self.state != StreamState.DISCONNECTED:
            raise WebSocketError("Already connected")

        # The server may have closed the previous connection.
        if self._consumer_task is not None:
            await self.disconnect()

        url = self.url
        self.state = StreamState.CONNECTING

        try:
            self._websocket = await websockets.connect(url)
        except Exception as e:
            self.state = StreamState.DISCONNECTED
            logger.error(f"WebSocket connection failed: {e}")
            raise WebSocketError(f"Failed to connect: {e}") from e

        self._queue = asyncio.Queue()
        self.state = StreamState.CONNECTED
        self._reader_task = asyncio.create_task(self._receive(self._websocket, self._queue))
        self._consumer_task = asyncio.create_task(self._consume(self._queue))

        logger.info("Connected to call events")

    async def disconnect(self) -> None:
        """
        Close the socket and wait for queued events to be handled.

        Safe to call more than once. A new ``connect`` is required to
        receive events again.
        """
        websocket, self._websocket = self._websocket, None
        reader, self._reader_task = self._reader_task, None
        consumer, self._consumer_task = self._consumer_task, None
        queue, self._queue = self._queue, None

        if websocket is not None:
            await websocket.close()

        if reader is not None:
            reader.cancel()
            try:
                await reader
            except asyncio.CancelledError:
                pass

        # A reader cancelled before it started never closes the queue.
        if queue is not None:
            queue.put_nowait(_CLOSED)

        # A handler may disconnect from inside the consumer task.
        if consumer is not None and consumer is not asyncio.current_task():
            await consumer

        if websocket is not None:
            logger.info("Disconnected from call events")

        self.state = StreamState.DISCONNECTED

    async def _receive(self, websocket: Any, queue: asyncio.Queue) -> None:
        """Read frames until the connection ends, queueing decoded events."""
        try:
            async for message in websocket:
                try:
                    event = decode_event(message)
                except (ValueError, TypeError, KeyError) as e:
                    logger.warning(f"Dropping undecodable call event: {e}")
                    continue
                queue.put_nowait(event)
        except websockets.ConnectionClosed as e:
            logger.warning(f"WebSocket connection closed: {e}")
        finally:
            self.state = StreamState.DISCONNECTED
            queue.put_nowait(_CLOSED)

    async def _consume(self, queue: asyncio.Queue) -> None:
        """Hand queued events to the handlers until the queue is closed."""
        while True:
            event = await queue.get()
            if event is _CLOSED:
                break
            await self._dispatch_event(event)

    async def _dispatch_event(self, event: CallEvent) -> None:
        """
        Dispatch an event to registered handlers, one at a time.

        Coroutine functions are awaited on the loop. Plain functions run in
        a worker thread, so a blocking handler does not hold up socket reads.
        """
        for handler in list(self._handlers):
            try:
                if asyncio.iscoroutinefunction(handler):
                    await handler(event)
                else:
                    result = await asyncio.to_thread(handler, event)
                    if asyncio.iscoroutine(result):
                        await result
            except Exception as e:
                logger.error(f"Error in event handler: {e}")
