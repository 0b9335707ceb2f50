"""
Tests for the error taxonomy and Horizon error mapping.
"""

from stellar_client.runtime.errors import (
    AccountNotFoundError,
    CollaboratorFailure,
    ErrorCode,
    HorizonApiError,
    InvalidMemoError,
    MissingApiClientError,
    MissingCollaboratorError,
    StellarError,
    TransactionFailedError,
    ValidationError,
    error_from_response,
)


class TestErrorHierarchy:
    """Error classes and their codes"""

    def test_validation_errors_share_a_base(self):
        error = InvalidMemoError("too long")
        assert isinstance(error, ValidationError)
        assert isinstance(error, StellarError)
        assert error.code == ErrorCode.INVALID_MEMO

    def test_missing_collaborator_message(self):
        error = MissingCollaboratorError()
        assert "set_api_client" in error.message
        assert error.code == ErrorCode.MISSING_COLLABORATOR
        assert MissingApiClientError is MissingCollaboratorError

    def test_str_includes_code(self):
        assert str(InvalidMemoError("too long")).startswith("[INVALID_MEMO] too long")

    def test_to_dict(self):
        cause = RuntimeError("boom")
        error = StellarError("failed", details={"k": "v"}, cause=cause)
        assert error.to_dict() == {
            "code": int(ErrorCode.UNKNOWN),
            "message": "failed",
            "details": {"k": "v"},
            "cause": "boom",
        }


class TestErrorFromResponse:
    """Mapping Horizon problem documents to errors"""

    def test_not_found(self):
        error = error_from_response(404, {"title": "Resource Missing", "type": "not_found"})
        assert isinstance(error, AccountNotFoundError)
        assert isinstance(error, CollaboratorFailure)
        assert error.status == 404
        assert error.message == "Resource Missing"

    def test_transaction_failed(self):
        body = {
            "title": "Transaction Failed",
            "extras": {"result_codes": {"transaction": "tx_bad_seq"}},
        }
        error = error_from_response(400, body)
        assert isinstance(error, TransactionFailedError)
        assert error.result_codes == {"transaction": "tx_bad_seq"}

    def test_other_status(self):
        error = error_from_response(500, {"detail": "internal"})
        assert type(error) is HorizonApiError
        assert error.status == 500
        assert error.message == "internal"

    def test_non_json_body(self):
        error = error_from_response(502, "Bad Gateway")
        assert isinstance(error, HorizonApiError)
        assert "502" in error.message
