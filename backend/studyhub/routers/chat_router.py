from fastapi import Depends, WebSocket

from studyhub.core.dependencies import get_chat_relay
from studyhub.services.chat_relay import ChatRelay


async def chat_socket(websocket: WebSocket, relay: ChatRelay = Depends(get_chat_relay)):
    """
    Group chat socket, mounted at settings.WS_PATH. No authentication.

    Send: {"type": "chat_message", "groupId": 1, "data": {"content": "hi", "groupId": 1, "userId": 7}}
    Receive: {"type": "new_message", "data": {<stored message>}}
    """
    await relay.serve(websocket)
