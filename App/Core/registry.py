# core/registry.py
"""In-memory registry of test accounts grouped by environment.

Selecting a registered account fans out to every broadcaster in the order
they were added, so a developer menu can auto-fill login details.
"""
from __future__ import annotations
from typing import Dict, Iterable, List, Mapping, Optional, Set, Tuple
from threading import Lock

from App.Core.broadcasters import Broadcaster, NotificationBroadcaster
from App.Core.constants import DEFAULT_ENVIRONMENT
from App.Models.models import Account
from App.Services.utility import logging_function


class AccountRegistry:
    """
    Maps environment names to sets of accounts.

    An environment with no accounts has no entry at all. The lock only makes
    the registry usable from FastAPI's worker threads; broadcasters are called
    outside of it.
    """

    def __init__(
        self,
        accounts: Optional[Mapping[str, Iterable[Account]]] = None,
        broadcasters: Optional[Iterable[Broadcaster]] = None,
        install_default_broadcaster: bool = True,
    ):
        self._accounts: Dict[str, Set[Account]] = {}
        for environment, items in (accounts or {}).items():
            env_accounts = set(items)
            if env_accounts:
                self._accounts[environment] = env_accounts

        if broadcasters is not None:
            self._broadcasters: List[Broadcaster] = list(broadcasters)
        elif install_default_broadcaster:
            self._broadcasters = [NotificationBroadcaster()]
        else:
            self._broadcasters = []
        self._lock = Lock()

    def register(self, account: Account, environment: str = DEFAULT_ENVIRONMENT) -> None:
        with self._lock:
            self._accounts.setdefault(environment, set()).add(account)
        logging_function(f"Registered {account!r} for {environment}", level="debug")

    def deregister(self, account: Account, environment: str = DEFAULT_ENVIRONMENT) -> None:
        with self._lock:
            env_accounts = self._accounts.get(environment)
            if env_accounts is None or account not in env_accounts:
                return
            env_accounts.discard(account)
            if not env_accounts:
                del self._accounts[environment]
        logging_function(f"Deregistered {account!r} from {environment}", level="debug")

    def accounts(self, environment: str = DEFAULT_ENVIRONMENT) -> Optional[Set[Account]]:
        """Return a copy of the accounts for ``environment`` or ``None`` if it has none."""
        with self._lock:
            env_accounts = self._accounts.get(environment)
            return set(env_accounts) if env_accounts is not None else None

    def environments(self) -> List[str]:
        with self._lock:
            return list(self._accounts)

    def add_broadcaster(self, broadcaster: Broadcaster) -> None:
        with self._lock:
            self._broadcasters.append(broadcaster)

    @property
    def broadcasters(self) -> Tuple[Broadcaster, ...]:
        with self._lock:
            return tuple(self._broadcasters)

    def select(self, account: Account, environment: str = DEFAULT_ENVIRONMENT) -> bool:
        """Notify every broadcaster that ``account`` was picked for ``environment``.

        Nothing happens unless the account is registered for that environment.
        A broadcaster that raises stops the fan-out and the error reaches the
        caller; broadcasters after it are not notified.

        Returns:
            ``True`` if the broadcasters were notified.
        """
        env_accounts = self.accounts(environment)
        if env_accounts is None or account not in env_accounts:
            logging_function(f"Ignoring selection of unregistered {account!r} in {environment}", level="debug")
            return False

        for broadcaster in self.broadcasters:
            try:
                broadcaster.notify(account, environment)
            except Exception as e:
                logging_function(
                    f"Broadcaster {type(broadcaster).__name__} failed for {environment}: {e}",
                    level="error",
                )
                raise
        logging_function(f"Selected {account!r} in {environment}", level="info")
        return True
