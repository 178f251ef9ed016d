from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator

from rendering.blocks import Block


class Sender(str, Enum):
    USER = "user"
    BOT = "bot"


@dataclass(frozen=True)
class ChatMessage:
    sender: Sender
    body: Block


Listener = Callable[[ChatMessage], None]


class MessageLog:
    """Append-only, ordered thread of chat messages."""

    def __init__(self):
        self._entries: list[ChatMessage] = []
        self._listeners: list[Listener] = []

    def append(self, sender: Sender, body: Block) -> ChatMessage:
        entry = ChatMessage(sender=sender, body=body)
        self._entries.append(entry)
        for listener in self._listeners:
            listener(entry)
        return entry

    def subscribe(self, listener: Listener):
        """Call `listener` with every entry appended from now on."""
        self._listeners.append(listener)

    @property
    def entries(self) -> tuple[ChatMessage, ...]:
        return tuple(self._entries)

    def __iter__(self) -> Iterator[ChatMessage]:
        return iter(self.entries)

    def __len__(self):
        return len(self._entries)

    def __getitem__(self, index):
        return self._entries[index]
