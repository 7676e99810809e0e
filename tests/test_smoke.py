def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json["status"] == "ok"


def test_api_index(client):
    r = client.get("/api")
    assert r.status_code == 200
    assert "endpoints" in r.json


def test_request_id_is_echoed(client):
    r = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert r.headers["X-Request-ID"] == "abc-123"


def test_unknown_api_route_is_json(client):
    r = client.get("/api/nope", headers={"X-Request-ID": "rid-1"})
    assert r.status_code == 404
    assert r.json["error"]["code"] == "http_error"
    assert r.json["error"]["request_id"] == "rid-1"


def test_unknown_page_is_html(client):
    r = client.get("/no-such-page")
    assert r.status_code == 404
    assert b"Page Not Found" in r.data


def test_static_data_endpoint(client):
    r = client.get("/data/books.json")
    assert r.status_code == 200
    assert r.mimetype == "application/json"
    assert client.get("/data/secrets.json").status_code == 404
