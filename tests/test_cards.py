"""Tests for the card endpoints."""

import logging


def _create_card(client, headers, title="Task One", content="desc"):
    return client.post("/card", json={"title": title, "content": content}, headers=headers)


def test_list_cards_empty(client, auth_headers):
    resp = client.get("/card", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json() == []


def test_create_card_returns_location_and_record(client, auth_headers):
    resp = _create_card(client, auth_headers)
    assert resp.status_code == 201
    data = resp.json()
    assert data["title"] == "Task One"
    assert data["content"] == "desc"
    assert set(data) == {"id", "title", "content"}
    assert resp.headers["location"] == f"/card/{data['id']}"


def test_create_then_get_card(client, auth_headers):
    card = _create_card(client, auth_headers, title="Write docs", content="Add a README").json()
    resp = client.get(f"/card/{card['id']}", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json() == card


def test_created_ids_are_unique(client, auth_headers):
    ids = {_create_card(client, auth_headers, title=f"Card {i}").json()["id"] for i in range(20)}
    assert len(ids) == 20


def test_list_cards_keeps_creation_order(client, auth_headers):
    titles = ["first", "second", "third"]
    for title in titles:
        _create_card(client, auth_headers, title=title)
    resp = client.get("/card", headers=auth_headers)
    assert [c["title"] for c in resp.json()] == titles


def test_get_card_not_found(client, auth_headers):
    resp = client.get("/card/does-not-exist", headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json() == {"error": "Card Not Found"}


def test_create_card_missing_title(client, auth_headers, store):
    resp = client.post("/card", json={"content": "desc"}, headers=auth_headers)
    assert resp.status_code == 400
    assert "error" in resp.json()
    assert store.list_cards() == []


def test_create_card_empty_content(client, auth_headers, store):
    resp = client.post("/card", json={"title": "Task", "content": ""}, headers=auth_headers)
    assert resp.status_code == 400
    assert store.list_cards() == []


def test_create_card_wrong_type_is_invalid_data(client, auth_headers, store):
    resp = client.post("/card", json={"title": 5, "content": "desc"}, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid data"}
    assert store.list_cards() == []


def test_create_card_malformed_json(client, auth_headers):
    resp = client.post(
        "/card",
        content=b"{not json",
        headers={**auth_headers, "Content-Type": "application/json"},
    )
    assert resp.status_code == 400


def test_delete_card(client, auth_headers):
    card = _create_card(client, auth_headers).json()
    resp = client.delete(f"/card/{card['id']}", headers=auth_headers)
    assert resp.status_code == 204
    assert resp.content == b""
    assert client.get(f"/card/{card['id']}", headers=auth_headers).status_code == 404
    assert client.get("/card", headers=auth_headers).json() == []


def test_delete_card_not_found_leaves_collections_unchanged(client, auth_headers):
    card = _create_card(client, auth_headers).json()
    client.post("/list", json={"header": "L", "cardIds": [card["id"]]}, headers=auth_headers)
    cards_before = client.get("/card", headers=auth_headers).json()
    lists_before = client.get("/list", headers=auth_headers).json()

    resp = client.delete("/card/unknown", headers=auth_headers)
    assert resp.status_code == 404

    assert client.get("/card", headers=auth_headers).json() == cards_before
    assert client.get("/list", headers=auth_headers).json() == lists_before


def test_delete_card_prunes_lists(client, auth_headers):
    c1 = _create_card(client, auth_headers, title="one").json()
    c2 = _create_card(client, auth_headers, title="two").json()
    c3 = _create_card(client, auth_headers, title="three").json()
    first = client.post(
        "/list", json={"header": "L", "cardIds": [c1["id"], c2["id"]]}, headers=auth_headers
    ).json()
    second = client.post(
        "/list", json={"header": "M", "cardIds": [c3["id"], c1["id"]]}, headers=auth_headers
    ).json()
    untouched = client.post(
        "/list", json={"header": "N", "cardIds": [c2["id"]]}, headers=auth_headers
    ).json()

    assert client.delete(f"/card/{c1['id']}", headers=auth_headers).status_code == 204

    assert client.get(f"/list/{first['id']}", headers=auth_headers).json()["cardIds"] == [c2["id"]]
    assert client.get(f"/list/{second['id']}", headers=auth_headers).json()["cardIds"] == [c3["id"]]
    assert client.get(f"/list/{untouched['id']}", headers=auth_headers).json()["cardIds"] == [c2["id"]]


def test_card_creation_and_deletion_are_logged(client, auth_headers, caplog):
    caplog.set_level(logging.INFO)
    card = _create_card(client, auth_headers).json()
    client.delete(f"/card/{card['id']}", headers=auth_headers)
    messages = [r.getMessage() for r in caplog.records]
    assert f"Card with id {card['id']} created" in messages
    assert f"Card with id {card['id']} deleted." in messages


def test_missing_title_is_logged(client, auth_headers, caplog):
    client.post("/card", json={"content": "desc"}, headers=auth_headers)
    assert any(
        r.levelno == logging.ERROR and r.getMessage() == "title is required" for r in caplog.records
    )
