"""
Base store with the lifecycle, locking and contract shared by all backends.

A store is an explicit handle: construct it, call ``setup`` to open a
session, issue queries and mutations, then ``close``. Every operation runs
under a single per-store lock and returns copies, never live records.
Queries signal "no match" with an empty result; only genuine failures raise.
"""

import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from ..constants import LogContextKey, StoreBackend
from ..exceptions import StoreNotConnectedError
from ..schemas import BaseAuthMethod, Binding, Service
from ..utils.clock import SystemClock
from ..utils.logger import ContextAwareLogger, get_logger


class BindingStore(ABC):
    """Contract every store backend satisfies."""

    backend: StoreBackend

    def __init__(
        self,
        clock: Optional[SystemClock] = None,
        logger: Optional[ContextAwareLogger] = None,
    ):
        """
        Initialize an unconnected store.

        Args:
            clock: Source of binding creation timestamps
            logger: Optional logger instance
        """
        self.clock = clock or SystemClock()
        self.logger = logger or get_logger()
        self._lock = threading.RLock()
        self._connected = False
        self._server = ""
        self._database = ""

    # ==================== LIFECYCLE ====================

    @property
    def connected(self) -> bool:
        return self._connected

    @property
    def server(self) -> str:
        return self._server

    @property
    def database(self) -> str:
        return self._database

    def session_info(self) -> Dict[str, Any]:
        """Diagnostic view of the current session."""
        with self._lock:
            return {
                "backend": self.backend.value,
                "connected": self._connected,
                "server": self._server,
                "database": self._database,
            }

    def setup(self, server: str, database: str) -> None:
        """
        Open a session on ``database`` at ``server``.

        Calling setup on an open store reopens it from scratch. If opening
        fails the store is left closed.
        """
        with self._lock:
            self._connected = False
            self._server = ""
            self._database = ""
            self._open(server, database)
            self._server = server
            self._database = database
            self._connected = True

        self.logger.info(
            "Store session opened",
            extra={
                LogContextKey.BACKEND.value: self.backend.value,
                LogContextKey.SERVER.value: server,
                LogContextKey.DATABASE.value: database,
            },
        )

    def close(self) -> None:
        """Close the session. Safe to call more than once."""
        with self._lock:
            was_connected = self._connected
            self._release()
            self._connected = False

        if was_connected:
            self.logger.info(
                "Store session closed",
                extra={
                    LogContextKey.BACKEND.value: self.backend.value,
                    LogContextKey.SERVER.value: self._server,
                    LogContextKey.DATABASE.value: self._database,
                },
            )

    def __enter__(self) -> "BindingStore":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    @abstractmethod
    def _open(self, server: str, database: str) -> None:
        """Acquire backend resources (and seed, for test doubles)."""

    @abstractmethod
    def _release(self) -> None:
        """Release backend resources; must tolerate being called when closed."""

    @contextmanager
    def _store_operation(self, operation_name: str) -> Iterator[None]:
        """
        Serialize an operation and require an open session.

        Raises:
            StoreNotConnectedError: If setup has not been called or close has
        """
        with self._lock:
            if not self._connected:
                raise StoreNotConnectedError(
                    f"Cannot run {operation_name}: store is not connected",
                    operation=operation_name,
                    backend=self.backend.value,
                )
            yield

    def _log_query(self, operation_name: str, result_count: int, **filters: Any) -> None:
        self.logger.debug(
            f"Executed {operation_name}",
            extra={
                LogContextKey.OPERATION.value: operation_name,
                LogContextKey.RESULT_COUNT.value: result_count,
                **filters,
            },
        )

    # ==================== QUERIES ====================

    @abstractmethod
    def query_services(self, name: str = "") -> List[Service]:
        """
        Services whose name equals ``name``; every service when ``name`` is empty.

        Returns:
            Copies in insertion order; empty list when nothing matches
        """

    @abstractmethod
    def find_auth_method(
        self, service: str, host: str, auth_type: str
    ) -> Optional[BaseAuthMethod]:
        """
        First auth method whose service, host and type all equal the arguments.

        Returns:
            A copy of the typed record, or None when nothing matches
        """

    def query_auth_method(self, service: str, host: str, auth_type: str) -> Dict[str, Any]:
        """
        Auth method for ``service`` at ``host`` of kind ``auth_type`` as a plain mapping.

        Returns:
            Field-name to value mapping; empty dict when nothing matches
        """
        auth_method = self.find_auth_method(service, host, auth_type)
        if auth_method is None:
            return {}
        return auth_method.to_mapping()

    @abstractmethod
    def query_bindings_by_dn(self, dn: str, host: str) -> List[Binding]:
        """Bindings whose DN and host both equal the arguments, in insertion order."""

    @abstractmethod
    def query_bindings(self, service: str = "", host: str = "") -> List[Binding]:
        """
        Bindings filtered by service and host.

        An empty argument matches any value for that field, so ("", "")
        returns every binding.
        """

    # ==================== MUTATIONS ====================

    @abstractmethod
    def insert_binding(
        self,
        name: str,
        service: str,
        host: str,
        dn: str,
        oidc_token: str,
        unique_key: str,
    ) -> Binding:
        """
        Append a new binding stamped with the store clock.

        Duplicates are accepted.

        Returns:
            A copy of the stored binding
        """

    @abstractmethod
    def update_binding(self, original: Binding, updated: Binding) -> Binding:
        """
        Replace the binding equal to ``original`` with ``updated``, keeping its position.

        Returns:
            A copy of the stored binding

        Raises:
            BindingNotFoundError: If no stored binding equals ``original``
        """

    def _new_binding(
        self,
        name: str,
        service: str,
        host: str,
        dn: str,
        oidc_token: str,
        unique_key: str,
    ) -> Binding:
        return Binding(
            name=name,
            service=service,
            host=host,
            dn=dn,
            oidc_token=oidc_token,
            unique_key=unique_key,
            created_on=self.clock.timestamp(),
            last_auth="",
        )
