from fastapi.requests import HTTPConnection

from studyhub.core.database import EntityStore
from studyhub.services.chat_relay import ChatRelay


def get_store(connection: HTTPConnection) -> EntityStore:
    return connection.app.state.store


def get_chat_relay(connection: HTTPConnection) -> ChatRelay:
    return connection.app.state.chat_relay
