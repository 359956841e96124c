"""Notifiers — implementações concretas de NotifierProtocol."""

from __future__ import annotations

from app.infra.notifiers.logging_notifier import LoggingNotifier
from app.infra.notifiers.memory_notifier import RecordingNotifier

__all__ = [
    "LoggingNotifier",
    "RecordingNotifier",
]
