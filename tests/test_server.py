import pytest
from fastapi.testclient import TestClient

from timeline import server
from timeline.service import TimelineService
from timeline.sources import StaticEventSource

from conftest import make_event


@pytest.fixture
def client(monkeypatch):
    def use(*events):
        monkeypatch.setattr(server, "service", TimelineService(StaticEventSource(events)))
        return TestClient(server.app)

    return use


def test_get_lanes(client) -> None:
    c = client(make_event("A", 0, 5), make_event("B", 1, 2), make_event("C", 6, 7))
    resp = c.get("/lanes")
    assert resp.status_code == 200
    ids = [[event["id"] for event in lane] for lane in resp.json()["lanes"]]
    assert ids == [["A", "C"], ["B"]]


def test_get_lanes_empty(client) -> None:
    assert client().get("/lanes").json() == {"lanes": []}


def test_get_layout_with_zoom(client) -> None:
    c = client(make_event("A", 0, 3))
    body = c.get("/layout", params={"width_per_day": 20}).json()
    assert body["width_per_day"] == 20.0
    assert body["lanes"][0]["blocks"][0]["width"] == 60.0


def test_get_layout_rejects_out_of_range_zoom(client) -> None:
    assert client(make_event("A", 0, 3)).get("/layout", params={"width_per_day": 500}).status_code == 422


def test_invalid_interval_maps_to_422(client) -> None:
    resp = client(make_event("bad", 4, 1)).get("/lanes")
    assert resp.status_code == 422
    assert resp.json()["event_id"] == "bad"


def test_get_stats(client) -> None:
    body = client(make_event("A", 0, 3), make_event("B", 3, 4)).get("/stats").json()
    assert body["lane_count"] == 1
    assert body["lane_sizes"] == [2]


def test_out_of_range_zoom_reports_config_error(client) -> None:
    resp = client(make_event("A", 0, 3)).get("/layout", params={"width_per_day": 2})
    assert resp.status_code == 422
    assert "width_per_day" in resp.json()["error"]


def test_websocket_streams_layout_snapshot(client, monkeypatch) -> None:
    monkeypatch.setattr(server, "WATCH_POLL_SECONDS", 0.01)
    c = client(make_event("A", 0, 5), make_event("B", 1, 2), make_event("C", 6, 7))
    with c.websocket_connect("/ws/timeline") as ws:
        snapshot = ws.receive_json()

    ids = [[block["event"]["id"] for block in lane["blocks"]] for lane in snapshot["lanes"]]
    assert ids == [["A", "C"], ["B"]]
    assert snapshot["width_per_day"] == 10.0


def test_websocket_reports_invalid_interval(client, monkeypatch) -> None:
    monkeypatch.setattr(server, "WATCH_POLL_SECONDS", 0.01)
    with client(make_event("bad", 4, 1)).websocket_connect("/ws/timeline") as ws:
        frame = ws.receive_json()

    assert frame["event_id"] == "bad"
    assert "bad" in frame["error"]
