# core/broadcasters.py
"""Broadcasters notified when a registered test account is selected.

A broadcaster is anything exposing ``notify(account, environment)``. The
default one posts a notification on an in-process :class:`NotificationCenter`
so any part of the application can observe selections without holding a
reference to the registry.
"""
from __future__ import annotations
from collections import defaultdict
from dataclasses import dataclass, field
from threading import Lock
from typing import Any, Callable, Dict, List, Optional, Protocol, runtime_checkable

from App.Core.constants import ACCOUNT_SELECTED
from App.Models.models import Account


@runtime_checkable
class Broadcaster(Protocol):
    def notify(self, account: Account, environment: str) -> None: ...


@dataclass(frozen=True)
class Notification:
    name: str
    sender: Any = None
    user_info: Dict[str, Any] = field(default_factory=dict)


class NotificationCenter:
    """Synchronous publish/subscribe hub keyed by notification name."""

    def __init__(self):
        self._observers: Dict[str, List[Callable[[Notification], None]]] = defaultdict(list)
        self._lock = Lock()

    def add_observer(self, name: str, handler: Callable[[Notification], None]) -> None:
        if not name:
            raise ValueError("name must be a non-empty string.")
        with self._lock:
            self._observers[name].append(handler)

    def remove_observer(self, name: str, handler: Callable[[Notification], None]) -> None:
        with self._lock:
            handlers = self._observers.get(name)
            if not handlers or handler not in handlers:
                return
            handlers.remove(handler)
            if not handlers:
                del self._observers[name]

    def observers(self, name: str) -> List[Callable[[Notification], None]]:
        with self._lock:
            return list(self._observers.get(name, []))

    def post(self, name: str, sender: Any = None, user_info: Optional[Dict[str, Any]] = None) -> Notification:
        """Deliver a notification to every observer of ``name``, in subscription order."""
        notification = Notification(name=name, sender=sender, user_info=dict(user_info or {}))
        for handler in self.observers(name):
            handler(notification)
        return notification


default_center = NotificationCenter()


class NotificationBroadcaster:
    """Posts ``ACCOUNT_SELECTED`` with the account and environment as user info."""

    def __init__(self, center: Optional[NotificationCenter] = None, name: str = ACCOUNT_SELECTED):
        self.center = center if center is not None else default_center
        self.name = name

    def notify(self, account: Account, environment: str) -> None:
        self.center.post(
            self.name,
            sender=self,
            user_info={"account": account, "environment": environment},
        )


class CallbackBroadcaster:
    """Adapts a plain ``callback(account, environment)`` function to a broadcaster."""

    def __init__(self, callback: Callable[[Account, str], None]):
        self.callback = callback

    def notify(self, account: Account, environment: str) -> None:
        self.callback(account, environment)
