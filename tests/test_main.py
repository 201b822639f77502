from fastapi.testclient import TestClient


def test_app_serves_token_routes(token_env):
    import main

    with TestClient(main.create_app()) as client:
        assert client.get("/api/v1/health/").json()["status"] == "healthy"
        resp = client.post("/api/v1/tokens", json={"sub": "demo", "aud": ["svc"], "lifetime": 60})
        assert resp.status_code == 200
        token = resp.json()["access_token"]
        assert client.post("/api/v1/tokens/validate", json={"token": token}).json()["valid"] is True
