import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)

MIRROR_KEY = "agenticAiContext"


class TokenMirror(ABC):
    """
    Write-only diagnostic copy of the current context token.
    The core never reads a mirror back; the session manager holds the real value.
    """

    @abstractmethod
    def write(self, token: str) -> None:
        raise NotImplementedError


class MemoryTokenMirror(TokenMirror):
    def __init__(self):
        self.storage: dict[str, str] = {}

    def write(self, token: str) -> None:
        self.storage[MIRROR_KEY] = token


class FileTokenMirror(TokenMirror):
    """Mirrors the token into a small JSON file, for inspecting a running widget."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def write(self, token: str) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({MIRROR_KEY: token}), encoding="utf-8")
        except OSError as e:
            logger.warning(f"Could not mirror context token to {self.path}: {e}")
