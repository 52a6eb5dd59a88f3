"""Tests for the exception hierarchy, factories and correlation ids."""

from sqlalchemy.exc import OperationalError

from binding_store.exceptions import (
    BaseError,
    BindingNotFoundError,
    ErrorCode,
    RepositoryError,
    StorageFailureError,
    StoreNotConnectedError,
    ValidationError,
    clear_correlation_id,
    get_correlation_id,
    not_found,
    set_correlation_id,
    storage_failure,
)


class TestBaseError:
    """Test BaseError functionality."""

    def test_basic_error(self):
        """Test basic error creation."""
        error = BaseError("Test error")

        assert error.message == "Test error"
        assert error.error_code == ErrorCode.INTERNAL_ERROR
        assert error.status_code == 500
        assert error.cause is None
        assert error.context["error_id"] == error.error_id
        assert str(error) == "Test error"

    def test_error_with_cause(self):
        """Test the cause is recorded in context and in the chain."""
        cause = ValueError("Original error")
        error = BaseError("Wrapped error", cause=cause)

        assert error.cause is cause
        assert error.context["cause"]["type"] == "ValueError"
        assert error.context["cause"]["message"] == "Original error"
        assert error.error_chain == [error, cause]

    def test_to_dict(self):
        """Test the API representation hides internal context keys."""
        error = BaseError(
            "Test error", error_code=ErrorCode.VALIDATION_FAILED, field="name"
        )

        result = error.to_dict()

        assert result["error"]["id"] == error.error_id
        assert result["error"]["code"] == "2000"
        assert result["error"]["message"] == "Test error"
        assert result["error"]["context"] == {"field": "name"}
        assert "cause" not in result["error"]

    def test_to_dict_with_cause(self):
        error = BaseError("Test error", cause=RuntimeError("boom"))

        result = error.to_dict(include_cause=True)

        assert result["error"]["cause"] == {"type": "RuntimeError", "message": "boom"}

    def test_add_context(self):
        """Test the fluent context interface."""
        error = BaseError("Test error").add_context(dn="cn=alice")

        assert error.context["dn"] == "cn=alice"


class TestStoreErrors:
    """Test store error classes."""

    def test_binding_not_found(self):
        error = BindingNotFoundError()

        assert isinstance(error, RepositoryError)
        assert error.message == "Binding not found"
        assert error.error_code == ErrorCode.NOT_FOUND
        assert error.status_code == 404

    def test_storage_failure(self):
        error = StorageFailureError()

        assert isinstance(error, RepositoryError)
        assert error.error_code == ErrorCode.DATABASE_ERROR
        assert error.status_code == 503

    def test_store_not_connected(self):
        error = StoreNotConnectedError(operation="query_bindings")

        assert error.message == "Store is not connected"
        assert error.error_code == ErrorCode.CONNECTION_ERROR
        assert error.context["operation"] == "query_bindings"

    def test_validation_error_field(self):
        error = ValidationError("Bad value", field="port")

        assert error.status_code == 400
        assert error.context["field"] == "port"


class TestFactories:
    """Test error factory functions."""

    def test_not_found(self):
        """Test the message names the resource and its identifiers."""
        error = not_found("Binding", dn="cn=alice", host="host1")

        assert isinstance(error, BindingNotFoundError)
        assert error.message == "Binding not found: dn=cn=alice, host=host1"
        assert error.context["resource_type"] == "Binding"
        assert error.context["dn"] == "cn=alice"

    def test_storage_failure_with_cause(self):
        """Test the driver error is kept as the cause."""
        cause = OperationalError("SELECT 1", {}, Exception("database is locked"))

        error = storage_failure("insert_binding", cause=cause, database="test_db")

        assert isinstance(error, StorageFailureError)
        assert error.message.startswith("Storage failure during insert_binding: ")
        assert error.cause is cause
        assert error.context["operation"] == "insert_binding"
        assert error.context["database"] == "test_db"

    def test_storage_failure_without_cause(self):
        error = storage_failure("setup")

        assert error.message == "Storage failure during setup"


class TestCorrelationId:
    """Test correlation id handling."""

    def test_set_get_clear(self):
        assert get_correlation_id() is None

        set_correlation_id("corr-123")
        assert get_correlation_id() == "corr-123"

        clear_correlation_id()
        assert get_correlation_id() is None

    def test_error_picks_up_correlation_id(self):
        """Test errors raised under a correlation id carry it."""
        set_correlation_id("corr-456")

        error = not_found("Binding", dn="cn=alice", host="host1")

        assert error.context["correlation_id"] == "corr-456"
        assert error.to_dict()["error"]["correlation_id"] == "corr-456"
