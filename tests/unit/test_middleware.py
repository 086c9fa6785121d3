from fastapi import FastAPI
from fastapi.testclient import TestClient

from buku_api.context import request_id_var
from buku_api.middleware import RequestContextMiddleware


def test_request_context_middleware() -> None:
    app = FastAPI()
    app.add_middleware(RequestContextMiddleware)

    @app.get("/")
    def read_root() -> dict:
        return {"request_id": request_id_var.get()}

    client = TestClient(app)

    # Without headers
    response = client.get("/")
    assert response.status_code == 200
    generated = response.json()["request_id"]
    assert generated.startswith("req-")
    assert response.headers["X-Request-Id"] == generated

    # With headers
    response = client.get("/", headers={"X-Request-Id": "req-456"})
    assert response.status_code == 200
    assert response.json() == {"request_id": "req-456"}
    assert response.headers["X-Request-Id"] == "req-456"

    assert request_id_var.get() is None
