from __future__ import annotations

import math
from typing import Any, Protocol, runtime_checkable

from loguru import logger as default_logger


class AreaEngineError(Exception):
    pass


class StorageError(AreaEngineError):
    pass


class DeliveryError(AreaEngineError):
    pass


@runtime_checkable
class RecordStore(Protocol):
    def save(self, record: dict[str, Any]) -> None: ...


@runtime_checkable
class Notifier(Protocol):
    def notify(self, target: str, message: str) -> None: ...


@runtime_checkable
class InputValidator(Protocol):
    def is_valid(self, value: Any) -> bool: ...


class InMemoryRecordStore:
    def __init__(self) -> None:
        self.records: list[dict[str, Any]] = []

    def save(self, record: dict[str, Any]) -> None:
        self.records.append(dict(record))


class LogNotifier:
    def __init__(self, logger=default_logger) -> None:
        self.logger = logger

    def notify(self, target: str, message: str) -> None:
        if not target.strip():
            raise DeliveryError("Notification target cannot be empty")
        self.logger.info("Notify {}: {}", target, message)


class NonNegativeValidator:
    def is_valid(self, value: Any) -> bool:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        return math.isfinite(value) and value >= 0
