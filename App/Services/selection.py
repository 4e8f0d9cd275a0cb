"""Keeps track of the latest account selections seen on a notification center.

The HTTP layer reads from here so a login form can be auto-filled with the
credentials picked from the developer menu.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional

from App.Core.broadcasters import Notification, NotificationCenter
from App.Core.constants import ACCOUNT_SELECTED
from App.Models.models import Account
from App.Services.utility import logging_function


@dataclass(frozen=True)
class Selection:
    account: Account
    environment: str


class SelectionRecorder:
    """Observer of ``ACCOUNT_SELECTED`` notifications."""

    def __init__(self):
        self._latest: Optional[Selection] = None
        self._by_environment: Dict[str, Selection] = {}

    def attach(self, center: NotificationCenter) -> None:
        center.add_observer(ACCOUNT_SELECTED, self.handle)

    def detach(self, center: NotificationCenter) -> None:
        center.remove_observer(ACCOUNT_SELECTED, self.handle)

    def handle(self, notification: Notification) -> None:
        account = notification.user_info.get("account")
        environment = notification.user_info.get("environment")
        if account is None or environment is None:
            logging_function(f"Malformed {notification.name} notification: {notification.user_info}", level="warning")
            return
        selection = Selection(account=account, environment=environment)
        self._latest = selection
        self._by_environment[environment] = selection

    def latest(self) -> Optional[Selection]:
        return self._latest

    def for_environment(self, environment: str) -> Optional[Selection]:
        return self._by_environment.get(environment)

    def clear(self) -> None:
        self._latest = None
        self._by_environment.clear()
