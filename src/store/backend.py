import abc
import threading
from contextlib import contextmanager
from typing import Dict, Iterator, Optional


class KeyValueBackend(metaclass=abc.ABCMeta):
    """String key-value storage the receipt store is built on."""

    @abc.abstractmethod
    def get(self, key: str) -> Optional[str]: ...

    @abc.abstractmethod
    def set(self, key: str, value: str) -> None: ...

    def exists(self, key: str) -> bool:
        return self.get(key) is not None

    @abc.abstractmethod
    def transaction(self):
        """Context manager that runs its block as one serialized unit."""


class MemoryBackend(KeyValueBackend):
    def __init__(self):
        self._data: Dict[str, str] = {}
        self._lock = threading.RLock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    @contextmanager
    def transaction(self) -> Iterator["MemoryBackend"]:
        with self._lock:
            yield self
