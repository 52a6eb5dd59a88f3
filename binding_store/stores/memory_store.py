"""
In-memory store backed by Python lists.

Used as the test double for the binding service: ``setup`` seeds the
deterministic fixtures from ``fixtures.py`` and data is lost on close.
"""

from typing import List, Optional

from ..constants import StoreBackend
from ..exceptions import not_found
from ..schemas import BaseAuthMethod, Binding, Service
from .base_store import BindingStore
from .fixtures import seed_auth_methods, seed_bindings, seed_services
from .matching import (
    auth_method_matches,
    binding_matches,
    binding_matches_dn,
    select_copies,
    service_matches,
)


class InMemoryStore(BindingStore):
    """List-backed store; each collection keeps insertion order."""

    backend = StoreBackend.MEMORY

    def __init__(self, clock=None, logger=None):
        super().__init__(clock=clock, logger=logger)
        self._services: List[Service] = []
        self._bindings: List[Binding] = []
        self._auth_methods: List[BaseAuthMethod] = []

    def _open(self, server: str, database: str) -> None:
        self._services = seed_services()
        self._bindings = seed_bindings()
        self._auth_methods = seed_auth_methods()

    def _release(self) -> None:
        # Data stays in place after close; operations are refused instead.
        pass

    def query_services(self, name: str = "") -> List[Service]:
        with self._store_operation("query_services"):
            services = select_copies(self._services, lambda s: service_matches(s, name))
        self._log_query("query_services", len(services), service_name=name)
        return services

    def find_auth_method(
        self, service: str, host: str, auth_type: str
    ) -> Optional[BaseAuthMethod]:
        with self._store_operation("query_auth_method"):
            matches = select_copies(
                self._auth_methods,
                lambda m: auth_method_matches(m, service, host, auth_type),
            )
        self._log_query(
            "query_auth_method", len(matches), service=service, host=host, auth_type=auth_type
        )
        return matches[0] if matches else None

    def query_bindings_by_dn(self, dn: str, host: str) -> List[Binding]:
        with self._store_operation("query_bindings_by_dn"):
            bindings = select_copies(self._bindings, lambda b: binding_matches_dn(b, dn, host))
        self._log_query("query_bindings_by_dn", len(bindings), dn=dn, host=host)
        return bindings

    def query_bindings(self, service: str = "", host: str = "") -> List[Binding]:
        with self._store_operation("query_bindings"):
            bindings = select_copies(
                self._bindings, lambda b: binding_matches(b, service, host)
            )
        self._log_query("query_bindings", len(bindings), service=service, host=host)
        return bindings

    def insert_binding(
        self,
        name: str,
        service: str,
        host: str,
        dn: str,
        oidc_token: str,
        unique_key: str,
    ) -> Binding:
        with self._store_operation("insert_binding"):
            binding = self._new_binding(name, service, host, dn, oidc_token, unique_key)
            self._bindings.append(binding)
            created = binding.model_copy(deep=True)

        self.logger.info(
            "Inserted binding",
            extra={"binding_name": name, "service": service, "host": host, "dn": dn},
        )
        return created

    def update_binding(self, original: Binding, updated: Binding) -> Binding:
        with self._store_operation("update_binding"):
            for index, binding in enumerate(self._bindings):
                if binding == original:
                    self._bindings[index] = updated.model_copy(deep=True)
                    stored = self._bindings[index].model_copy(deep=True)
                    break
            else:
                raise not_found("Binding", dn=original.dn, host=original.host)

        self.logger.info(
            "Updated binding",
            extra={"binding_name": stored.name, "dn": stored.dn, "host": stored.host},
        )
        return stored
