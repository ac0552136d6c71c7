async def test_health(client):
    body = (await client.get("/health")).json()
    assert body["status"] == "healthy"
    assert body["service"] == "panshare"


async def test_ready_checks_database(client):
    response = await client.get("/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ready"}


async def test_live_and_unknown_route(client):
    assert (await client.get("/live")).json() == {"status": "alive"}

    missing = await client.get("/nowhere")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Not Found", "code": "HTTP_ERROR"}
