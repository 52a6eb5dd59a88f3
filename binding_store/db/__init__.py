"""
SQLAlchemy models and connection management for the SQL backend.
"""

from .db_base import JSON, Base
from .db_binding_models import AuthMethodModel, BindingModel, ServiceModel
from .db_config import DatabaseManager, import_all_models

__all__ = [
    # Base definitions
    "Base",
    "JSON",
    # Configuration
    "DatabaseManager",
    "import_all_models",
    # Models
    "AuthMethodModel",
    "BindingModel",
    "ServiceModel",
]
