"""Tests for the directory error hierarchy."""

from advocate_directory.core.errors import (
    DirectoryError,
    ErrorCategory,
    FetchError,
    ListingFailedError,
    SeedFailedError,
    StorageError,
)


class TestDirectoryError:
    def test_defaults(self):
        err = DirectoryError()
        assert err.message == "Directory operation failed"
        assert err.category is ErrorCategory.INTERNAL
        assert err.cause is None

    def test_cause_chained(self):
        cause = ValueError("driver detail")
        err = StorageError(cause=cause)
        assert err.__cause__ is cause
        assert str(err) == "Storage operation failed"

    def test_with_context(self):
        err = ListingFailedError().with_context(keyword="anx")
        assert err.context == {"keyword": "anx"}
        assert err.to_dict()["context"] == {"keyword": "anx"}

    def test_to_dict(self):
        data = SeedFailedError(cause=RuntimeError("x")).to_dict()
        assert data["error_type"] == "SeedFailedError"
        assert data["message"] == "Could not seed advocates"
        assert data["category"] == "STORAGE"


class TestHierarchy:
    def test_storage_subclasses(self):
        assert issubclass(ListingFailedError, StorageError)
        assert issubclass(SeedFailedError, StorageError)
        assert ListingFailedError().category is ErrorCategory.STORAGE

    def test_fetch_error(self):
        err = FetchError("HTTP error! status: 500", status_code=500)
        assert err.category is ErrorCategory.NETWORK
        assert err.to_dict()["status_code"] == 500
        assert "status_code" not in FetchError().to_dict()
