"""
Table models for services, bindings and auth methods.

Just the data structure - matching and conversion live in the SQL store.
Every table carries an autoincrement ``id`` so result order is insertion order.
"""

from sqlalchemy import Column, Index, Integer, String

from .db_base import JSON, Base


class ServiceModel(Base):
    """Row for a Service."""

    __tablename__ = "services"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True)
    hosts = Column(JSON, nullable=False)
    auth_types = Column(JSON, nullable=False)
    auth_method = Column(String(100), nullable=False, default="")
    retrieval_field = Column(String(100), nullable=False, default="")


class BindingModel(Base):
    """Row for a Binding."""

    __tablename__ = "bindings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    service = Column(String(255), nullable=False)
    host = Column(String(255), nullable=False)
    dn = Column(String(1024), nullable=False, default="")
    oidc_token = Column(String(2048), nullable=False, default="")
    unique_key = Column(String(255), nullable=False, default="")
    created_on = Column(String(32), nullable=False, default="")
    last_auth = Column(String(32), nullable=False, default="")

    __table_args__ = (
        Index("ix_binding_dn_host", "dn", "host"),
        Index("ix_binding_service_host", "service", "host"),
    )


class AuthMethodModel(Base):
    """Row for an auth method; variant-specific fields go in ``attributes``."""

    __tablename__ = "auth_methods"

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(String(50), nullable=False)
    service = Column(String(255), nullable=False)
    host = Column(String(255), nullable=False)
    attributes = Column(JSON, nullable=False)

    __table_args__ = (Index("ix_auth_method_lookup", "service", "host", "type"),)
