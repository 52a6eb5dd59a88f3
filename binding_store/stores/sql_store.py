"""
SQL store on SQLAlchemy (SQLite or PostgreSQL).

This is the real backing store. ``setup`` opens an engine and creates missing
tables; it does not seed data. Results are ordered by the autoincrement row
id, which is insertion order. Driver errors surface as StorageFailureError.
"""

from contextlib import contextmanager
from typing import Iterable, Iterator, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..config import DatabaseConfig, get_config
from ..constants import StoreBackend
from ..db import AuthMethodModel, BindingModel, DatabaseManager, ServiceModel
from ..exceptions import not_found, storage_failure
from ..schemas import BaseAuthMethod, Binding, Service, parse_auth_method
from .base_store import BindingStore

# Columns of AuthMethodModel; every other variant field goes into ``attributes``
_AUTH_METHOD_KEY_FIELDS = {"type", "service", "host"}


class SQLStore(BindingStore):
    """Store persisting services, bindings and auth methods in SQL tables."""

    backend = StoreBackend.SQL

    def __init__(self, db_config: Optional[DatabaseConfig] = None, clock=None, logger=None):
        """
        Initialize an unconnected SQL store.

        Args:
            db_config: Connection settings; defaults to the application config
            clock: Source of binding creation timestamps
            logger: Optional logger instance
        """
        super().__init__(clock=clock, logger=logger)
        self.db_config = db_config or get_config().db
        self.db_manager: Optional[DatabaseManager] = None

    def _open(self, server: str, database: str) -> None:
        self._release()
        manager = DatabaseManager(self.db_config, server, database)
        try:
            manager.create_tables()
        except SQLAlchemyError as e:
            manager.close()
            raise storage_failure("setup", cause=e, server=server, database=database) from e
        self.db_manager = manager

    def _release(self) -> None:
        if self.db_manager is not None:
            self.db_manager.close()
            self.db_manager = None

    @contextmanager
    def _db_session(self, operation_name: str, is_read_only: bool = True) -> Iterator[Session]:
        """
        Short-lived session for one operation.

        Write operations commit on success; any failure rolls back.

        Raises:
            StorageFailureError: If the database raises
        """
        with self._store_operation(operation_name):
            session = self.db_manager.get_session()  # type: ignore[union-attr]
            try:
                yield session
                if not is_read_only:
                    session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                raise storage_failure(
                    operation_name,
                    cause=e,
                    server=self._server,
                    database=self._database,
                ) from e
            except Exception:
                session.rollback()
                raise
            finally:
                session.close()

    # ==================== ROW CONVERSION ====================

    @staticmethod
    def _to_service(row: ServiceModel) -> Service:
        return Service(
            name=row.name,
            hosts=list(row.hosts),
            auth_types=list(row.auth_types),
            auth_method=row.auth_method,
            retrieval_field=row.retrieval_field,
        )

    @staticmethod
    def _to_binding(row: BindingModel) -> Binding:
        return Binding(
            name=row.name,
            service=row.service,
            host=row.host,
            dn=row.dn,
            oidc_token=row.oidc_token,
            unique_key=row.unique_key,
            created_on=row.created_on,
            last_auth=row.last_auth,
        )

    @staticmethod
    def _to_auth_method(row: AuthMethodModel) -> BaseAuthMethod:
        return parse_auth_method(
            {"type": row.type, "service": row.service, "host": row.host, **row.attributes}
        )

    @staticmethod
    def _from_auth_method(auth_method: BaseAuthMethod) -> AuthMethodModel:
        return AuthMethodModel(
            type=auth_method.type,
            service=auth_method.service,
            host=auth_method.host,
            attributes=auth_method.model_dump(exclude=_AUTH_METHOD_KEY_FIELDS),
        )

    # ==================== BULK LOAD ====================

    def load(
        self,
        services: Iterable[Service] = (),
        bindings: Iterable[Binding] = (),
        auth_methods: Iterable[BaseAuthMethod] = (),
    ) -> None:
        """
        Append records to the database in the given order.

        This is the seeding path for a real database; the query surface
        itself never creates services or auth methods.

        Raises:
            StorageFailureError: On constraint violations such as a duplicate service name
        """
        with self._db_session("load", is_read_only=False) as session:
            for service in services:
                session.add(ServiceModel(**service.model_dump()))
            for binding in bindings:
                session.add(BindingModel(**binding.model_dump()))
            for auth_method in auth_methods:
                session.add(self._from_auth_method(auth_method))

        self.logger.info("Loaded records", extra={"database": self._database})

    # ==================== QUERIES ====================

    def query_services(self, name: str = "") -> List[Service]:
        with self._db_session("query_services") as session:
            stmt = select(ServiceModel).order_by(ServiceModel.id)
            if name:
                stmt = stmt.where(ServiceModel.name == name)
            services = [self._to_service(row) for row in session.execute(stmt).scalars()]
        self._log_query("query_services", len(services), service_name=name)
        return services

    def find_auth_method(
        self, service: str, host: str, auth_type: str
    ) -> Optional[BaseAuthMethod]:
        with self._db_session("query_auth_method") as session:
            stmt = (
                select(AuthMethodModel)
                .where(
                    AuthMethodModel.service == service,
                    AuthMethodModel.host == host,
                    AuthMethodModel.type == auth_type,
                )
                .order_by(AuthMethodModel.id)
                .limit(1)
            )
            row = session.execute(stmt).scalars().first()
            auth_method = self._to_auth_method(row) if row is not None else None
        self._log_query(
            "query_auth_method",
            0 if auth_method is None else 1,
            service=service,
            host=host,
            auth_type=auth_type,
        )
        return auth_method

    def query_bindings_by_dn(self, dn: str, host: str) -> List[Binding]:
        with self._db_session("query_bindings_by_dn") as session:
            stmt = (
                select(BindingModel)
                .where(BindingModel.dn == dn, BindingModel.host == host)
                .order_by(BindingModel.id)
            )
            bindings = [self._to_binding(row) for row in session.execute(stmt).scalars()]
        self._log_query("query_bindings_by_dn", len(bindings), dn=dn, host=host)
        return bindings

    def query_bindings(self, service: str = "", host: str = "") -> List[Binding]:
        with self._db_session("query_bindings") as session:
            stmt = select(BindingModel).order_by(BindingModel.id)
            if service:
                stmt = stmt.where(BindingModel.service == service)
            if host:
                stmt = stmt.where(BindingModel.host == host)
            bindings = [self._to_binding(row) for row in session.execute(stmt).scalars()]
        self._log_query("query_bindings", len(bindings), service=service, host=host)
        return bindings

    # ==================== MUTATIONS ====================

    def insert_binding(
        self,
        name: str,
        service: str,
        host: str,
        dn: str,
        oidc_token: str,
        unique_key: str,
    ) -> Binding:
        binding = self._new_binding(name, service, host, dn, oidc_token, unique_key)
        with self._db_session("insert_binding", is_read_only=False) as session:
            session.add(BindingModel(**binding.model_dump()))

        self.logger.info(
            "Inserted binding",
            extra={"binding_name": name, "service": service, "host": host, "dn": dn},
        )
        return binding

    def update_binding(self, original: Binding, updated: Binding) -> Binding:
        with self._db_session("update_binding", is_read_only=False) as session:
            stmt = select(BindingModel)
            for field, value in original.model_dump().items():
                stmt = stmt.where(getattr(BindingModel, field) == value)
            row = session.execute(stmt.order_by(BindingModel.id).limit(1)).scalars().first()
            if row is None:
                raise not_found("Binding", dn=original.dn, host=original.host)

            for field, value in updated.model_dump().items():
                setattr(row, field, value)
            session.flush()
            stored = self._to_binding(row)

        self.logger.info(
            "Updated binding",
            extra={"binding_name": stored.name, "dn": stored.dn, "host": stored.host},
        )
        return stored
