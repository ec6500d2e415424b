"""Tests for the root identity endpoint and fault handling."""

from __future__ import annotations

from fastapi.testclient import TestClient

from app.api.application import create_api_application
from app.bootstrap import bootstrap_create_application
from app.config import AppSettings
from app.domain import HostIdentity


def _build_application(identity_name: str = "replica-a"):
    """Create application for a fixed replica identity.

    Args:
        identity_name: Identity reported by the root endpoint.

    Returns:
        FastAPI: Composed application.
    """

    return create_api_application(
        AppSettings(environment_name="test"),
        HostIdentity(name=identity_name, source="override"),
    )


def test_api_identity_returns_greeting_with_identity() -> None:
    """Return `Hello from <identity>!` as plain text.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when greeting does not match.
    """

    client = TestClient(_build_application("replica-a"))

    response = client.get("/")

    assert response.status_code == 200
    assert response.text == "Hello from replica-a!"
    assert response.headers["content-type"].startswith("text/plain")


def test_api_identity_is_constant_across_ten_requests() -> None:
    """Report the same identity for ten consecutive requests in one process.

    Returns:
        None: Assertions validate identity stability.

    Raises:
        AssertionError: Raised when identity changes between requests.
    """

    client = TestClient(_build_application("replica-a"))

    responses = [client.get("/") for _ in range(10)]

    assert [response.status_code for response in responses] == [200] * 10
    assert all(response.text.startswith("Hello from ") for response in responses)
    suffixes = {response.text[len("Hello from ") :] for response in responses}
    assert suffixes == {"replica-a!"}


def test_api_identity_uses_hostname_when_no_override(monkeypatch) -> None:
    """Report the OS hostname when no identity override is configured.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate hostname fallback.

    Raises:
        AssertionError: Raised when hostname is not reported.
    """

    monkeypatch.setattr("app.domain.identity.socket.gethostname", lambda: "pod-7f9c")
    application = bootstrap_create_application(settings=AppSettings(environment_name="test", replica_identity=None))
    client = TestClient(application)

    response = client.get("/")

    assert response.text == "Hello from pod-7f9c!"


def test_api_identity_unknown_path_returns_not_found() -> None:
    """Return 404 for unknown paths and keep serving afterwards.

    Returns:
        None: Assertions validate not-found handling.

    Raises:
        AssertionError: Raised when unknown path handling is wrong.
    """

    client = TestClient(_build_application())

    assert client.get("/does-not-exist").status_code == 404
    assert client.post("/health").status_code == 405
    assert client.get("/health").text == "OK"


def test_api_identity_handler_fault_returns_internal_server_error() -> None:
    """Return 500 for unexpected handler faults without breaking other routes.

    Returns:
        None: Assertions validate fault isolation.

    Raises:
        AssertionError: Raised when faults escape as non-500 responses.
    """

    application = _build_application()

    def _failing_handler() -> str:
        raise RuntimeError("simulated fault")

    application.add_api_route("/fault", _failing_handler, methods=["GET"])
    client = TestClient(application, raise_server_exceptions=False)

    fault_response = client.get("/fault")

    assert fault_response.status_code == 500
    assert fault_response.text == "Internal Server Error"
    assert client.get("/").text == "Hello from replica-a!"
