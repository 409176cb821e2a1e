"""
Tests for the /albums routes.
"""
import json

import pytest
from fastapi.testclient import TestClient

from album_store_api.app.main import create_app
from album_store_api.app.schemas.album import Album, AlbumReplace
from album_store_api.app.services.album_store import AlbumStore


B_SIDE = {"id": "4", "title": "B Side", "artist": "Various", "price": 12.5}


def _ids(payload):
    return [album["id"] for album in payload]


def test_list_albums_sorted_by_id(client):
    resp = client.get("/albums")
    assert resp.status_code == 200
    assert _ids(resp.json()) == ["1", "2", "3"]


def test_list_albums_is_pretty_printed(client):
    resp = client.get("/albums")
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.text.startswith("[\n    {")


def test_get_album_by_id(client):
    resp = client.get("/albums/2")
    assert resp.status_code == 200
    assert resp.json() == {"id": "2", "title": "Jeru", "artist": "Gerry Mulligan", "price": 17.99}


def test_get_unknown_album_returns_404_message(client):
    resp = client.get("/albums/42")
    assert resp.status_code == 404
    assert resp.json() == {"message": "album not found"}


def test_post_album_returns_201_and_stores_it(client, store):
    resp = client.post("/albums", json=B_SIDE)
    assert resp.status_code == 201
    assert resp.json() == B_SIDE
    assert store.find_by_id("4") == Album(**B_SIDE)


def test_post_duplicate_id_is_accepted(client):
    client.post("/albums", json={"id": "1", "title": "Again", "artist": "Someone", "price": 1.0})
    resp = client.get("/albums")
    assert _ids(resp.json()) == ["1", "1", "2", "3"]
    # Lookup still returns the album inserted first.
    assert client.get("/albums/1").json()["title"] == "Blue Train"


def test_post_missing_fields_default_to_empty_values(client):
    resp = client.post("/albums", json={"id": "5"})
    assert resp.status_code == 201
    assert resp.json() == {"id": "5", "title": "", "artist": "", "price": 0.0}


def test_post_invalid_json_returns_400(client, store):
    resp = client.post(
        "/albums",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert "message" in resp.json()
    assert len(store) == 3


def test_post_wrong_field_type_returns_400(client, store):
    resp = client.post("/albums", json={"id": "6", "title": "T", "artist": "A", "price": "cheap"})
    assert resp.status_code == 400
    assert "price" in resp.json()["message"]
    assert store.find_by_id("6") is None


def test_post_non_object_body_returns_400(client, store):
    resp = client.post("/albums", json=["id", "7"])
    assert resp.status_code == 400
    assert len(store) == 3


def test_post_without_body_returns_400(client):
    resp = client.post("/albums")
    assert resp.status_code == 400


MALFORMED_BODIES = [
    b'{"id": "7", "price": "12.5"}',
    b'{"id": "7", "price": true}',
    b'{"id": "7", "price": 1e400}',
    b'{"id": "7", "price": NaN}',
    b'{"id": "7", "price": Infinity}',
    b'{"id": "7", "title": 12}',
    b'{"id": "7", "artist": null}',
    b'{"id": 5}',
]


@pytest.mark.parametrize("body", MALFORMED_BODIES)
def test_post_rejects_values_of_the_wrong_type(client, store, body):
    before = store.list_albums()

    resp = client.post("/albums", content=body, headers={"Content-Type": "application/json"})

    assert resp.status_code == 400
    assert resp.json()["message"].startswith("invalid album body")
    assert store.list_albums() == before
    # Listing keeps working after a rejected body.
    assert client.get("/albums").status_code == 200


@pytest.mark.parametrize("body", MALFORMED_BODIES)
def test_put_rejects_values_of_the_wrong_type(client, store, body):
    before = store.list_albums()

    resp = client.put("/albums/1", content=body, headers={"Content-Type": "application/json"})

    assert resp.status_code == 400
    assert store.list_albums() == before


def test_post_accepts_integer_price(client):
    resp = client.post("/albums", json={"id": "8", "title": "T", "artist": "A", "price": 20})
    assert resp.status_code == 201
    assert resp.json()["price"] == 20.0


def test_put_replaces_album_and_ignores_body_id(client):
    resp = client.put("/albums/3", json={"id": "999", "title": "Sarah", "artist": "Sarah Vaughan", "price": 30.0})
    assert resp.status_code == 204
    assert resp.content == b""

    assert client.get("/albums/3").json() == {
        "id": "3",
        "title": "Sarah",
        "artist": "Sarah Vaughan",
        "price": 30.0,
    }
    assert client.get("/albums/999").status_code == 404


def test_put_unknown_id_leaves_store_unchanged(client):
    before = client.get("/albums").json()
    resp = client.put("/albums/42", json={"title": "Ghost", "artist": "Nobody", "price": 0.0})
    assert resp.status_code == 204
    assert client.get("/albums").json() == before


def test_put_malformed_body_returns_400_and_keeps_album(client):
    resp = client.put("/albums/1", json={"title": 12})
    assert resp.status_code == 400
    assert client.get("/albums/1").json()["title"] == "Blue Train"


def test_delete_returns_remaining_albums(client):
    resp = client.delete("/albums/2")
    assert resp.status_code == 200
    assert _ids(resp.json()) == ["1", "3"]
    assert client.get("/albums/2").status_code == 404


def test_delete_unknown_id_is_idempotent(client):
    resp = client.delete("/albums/nope")
    assert resp.status_code == 200
    assert _ids(resp.json()) == ["1", "2", "3"]


def test_delete_then_post_scenario(client):
    client.delete("/albums/2")
    client.post("/albums", json=B_SIDE)
    assert _ids(client.get("/albums").json()) == ["1", "3", "4"]


def test_album_json_round_trip_preserves_fields():
    album = Album(id="7", title="Kind of Blue", artist="Miles Davis", price=0.1 + 0.2)
    decoded = Album.model_validate(json.loads(album.model_dump_json()))
    assert decoded == album
    assert decoded.price == 0.1 + 0.2


def test_health_reports_album_count(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "albums": 3}


def test_apps_do_not_share_stores():
    first = TestClient(create_app(AlbumStore()))
    second = TestClient(create_app(AlbumStore.with_seed_albums()))
    first.post("/albums", json=B_SIDE)
    assert _ids(first.get("/albums").json()) == ["4"]
    assert _ids(second.get("/albums").json()) == ["1", "2", "3"]


def test_replace_body_drops_id_when_dumped():
    body = AlbumReplace.model_validate({"id": "999", "title": "T", "artist": "A", "price": 1.0})
    assert body.id == "999"
    assert body.model_dump() == {"title": "T", "artist": "A", "price": 1.0}
