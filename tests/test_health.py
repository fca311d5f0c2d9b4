from pymongo.errors import ServerSelectionTimeoutError

from mock_mongo import FakeMongoClient, create_client


def test_health_up_without_key():
    with create_client() as client:
        resp = client.get("/actuator/health")
        assert resp.status_code == 200
        assert resp.json() == {
            "status": "UP",
            "components": {"mongoAtlas": {"status": "UP"}},
        }


def test_health_down():
    fake = FakeMongoClient(error=ServerSelectionTimeoutError("no servers"))
    with create_client(fake) as client:
        resp = client.get("/actuator/health")
        assert resp.status_code == 503
        assert resp.json() == {
            "status": "DOWN",
            "components": {
                "mongoAtlas": {"status": "DOWN", "details": {"error": "no servers"}}
            },
        }


def test_indicator_endpoint():
    with create_client() as client:
        resp = client.get("/actuator/health/mongoAtlas")
        assert resp.status_code == 200
        assert resp.json() == {"status": "UP"}

    fake = FakeMongoClient(error=RuntimeError("boom"))
    with create_client(fake) as client:
        resp = client.get("/actuator/health/mongoAtlas")
        assert resp.status_code == 503
        assert resp.json()["details"]["error"] == "boom"
