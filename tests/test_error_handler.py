from src.error_handler import ErrorHandler
from src.integrations.contracts.envelope import ApiError


def test_handle_exception_returns_payload():
    eh = ErrorHandler()
    out = eh.handle_exception(Exception("boom"), context={"k": "v"})
    assert out["fallback"] is True
    assert "internal error" in out["message"].lower()
    assert "boom" in out["metadata"]["error"]


def test_handle_api_error_surfaces_server_message():
    eh = ErrorHandler()
    err = ApiError("missing column", 422, {"message": "missing column"})
    out = eh.handle_exception(err, context={"page": "bias_detection"})
    assert out["message"] == "missing column"
    assert out["metadata"]["status"] == 422
    assert out["metadata"]["kind"] == "http"
    assert out["metadata"]["response"] == {"message": "missing column"}
    assert out["metadata"]["context"] == {"page": "bias_detection"}
