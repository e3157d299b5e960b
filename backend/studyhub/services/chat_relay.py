"""
Chat relay

Accepts chat submissions over WebSocket, stores them, and fans every stored
message out to all open connections:
- inbound `chat_message` frames are persisted through the entity store
- the stored record goes out as a `new_message` frame to every socket,
  the sender included, whatever group it is looking at
- malformed or rejected frames are logged and dropped; the sender gets
  no reply and its connection stays open
"""

import itertools
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from fastapi import WebSocket
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool
from starlette.websockets import WebSocketState

from studyhub.core.database import EntityStore
from studyhub.models.base import Message
from studyhub.repositories.message_repository import create_message_db
from studyhub.schemas.message_schemas import ChatEnvelope, ChatMessageData, MessageResponse

logger = logging.getLogger(__name__)


class EventType(str, Enum):
    """Envelope types on the chat socket"""
    CHAT_MESSAGE = "chat_message"  # inbound
    NEW_MESSAGE = "new_message"  # outbound


@dataclass
class ChatConnection:
    """One accepted socket"""
    id: int
    websocket: WebSocket


class ChatRelay:
    """
    Broadcast relay over every open chat socket.

    Runs on the event loop only, so the connection table needs no lock.
    Broadcasts iterate over a snapshot: a socket that closes mid-broadcast
    is dropped without affecting delivery to the others.
    """

    def __init__(self, store: EntityStore):
        self.store = store
        self._connections: Dict[int, ChatConnection] = {}
        self._ids = itertools.count(1)

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    async def connect(self, websocket: WebSocket) -> ChatConnection:
        await websocket.accept()
        connection = ChatConnection(id=next(self._ids), websocket=websocket)
        self._connections[connection.id] = connection
        logger.info("Chat socket %s connected (%s open)", connection.id, self.connection_count)
        return connection

    def disconnect(self, connection: ChatConnection) -> None:
        if self._connections.pop(connection.id, None) is not None:
            logger.info("Chat socket %s disconnected (%s open)", connection.id, self.connection_count)

    async def serve(self, websocket: WebSocket) -> None:
        """Run one socket until the peer closes it."""
        connection = await self.connect(websocket)
        try:
            while True:
                frame = await websocket.receive()
                if frame["type"] == "websocket.disconnect":
                    break
                raw = frame.get("text")
                if raw is None and frame.get("bytes") is not None:
                    raw = frame["bytes"].decode("utf-8", errors="replace")
                if raw is not None:
                    await self.handle_payload(raw)
        finally:
            self.disconnect(connection)

    async def handle_payload(self, raw: str) -> Optional[Message]:
        """Validate, persist and broadcast one inbound frame. Returns the stored message, if any."""
        try:
            envelope = ChatEnvelope.model_validate_json(raw)
        except ValidationError as exc:
            logger.warning("Dropping unparsable chat frame: %s", exc.errors(include_url=False))
            return None

        if envelope.type != EventType.CHAT_MESSAGE.value:
            logger.debug("Ignoring chat frame of type %r", envelope.type)
            return None
        if not envelope.groupId:
            logger.warning("Dropping chat_message without groupId")
            return None
        try:
            data = ChatMessageData.model_validate(envelope.data)
        except ValidationError as exc:
            logger.warning("Dropping chat_message with invalid data: %s", exc.errors(include_url=False))
            return None
        if not data.userId:
            logger.warning("Dropping chat_message without userId")
            return None

        group_id = data.groupId if data.groupId is not None else envelope.groupId
        try:
            message = await run_in_threadpool(
                create_message_db, self.store, data.content, group_id, data.userId
            )
        except Exception:
            logger.exception("Failed to store chat message for group %s", group_id)
            return None

        await self.broadcast({
            "type": EventType.NEW_MESSAGE.value,
            "data": MessageResponse.model_validate(message).model_dump(mode="json", by_alias=True),
        })
        return message

    async def broadcast(self, payload: Dict[str, Any]) -> int:
        """Send payload to every open socket; returns how many sends succeeded."""
        delivered = 0
        snapshot: List[ChatConnection] = list(self._connections.values())
        for connection in snapshot:
            if connection.websocket.client_state != WebSocketState.CONNECTED:
                self.disconnect(connection)
                continue
            try:
                await connection.websocket.send_json(payload)
                delivered += 1
            except Exception as exc:
                # Peer closed between the snapshot and this send
                logger.warning("Send to chat socket %s failed: %s", connection.id, exc)
                self.disconnect(connection)
        return delivered
