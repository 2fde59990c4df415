from app.dependencies import get_memo_store
from app.main import app


def _create(client, **fields):
    body = {"title": "Trip", "content": "Seoul palaces", "category": "personal", "tags": ["travel"]}
    body.update(fields)
    resp = client.post("/api/v1/memos/", json=body)
    assert resp.status_code == 201
    return resp.json()


def test_create_returns_camel_case_memo(client):
    memo = _create(client)
    assert memo["title"] == "Trip"
    assert memo["aiSummary"] is None
    assert memo["createdAt"] == memo["updatedAt"]
    assert {"id", "category", "tags"} <= set(memo)


def test_list_applies_search_and_category(client):
    _create(client, title="Trip")
    _create(client, title="Standup", content="daily", category="work", tags=["meeting"])

    body = client.get("/api/v1/memos/", params={"q": "meet"}).json()
    assert [m["title"] for m in body["memos"]] == ["Standup"]
    assert body["searchQuery"] == "meet"
    assert body["stats"] == {"total": 2, "byCategory": {"personal": 1, "work": 1}, "filtered": 1}

    body = client.get("/api/v1/memos/", params={"category": "personal"}).json()
    assert [m["title"] for m in body["memos"]] == ["Trip"]
    assert body["selectedCategory"] == "personal"

    body = client.get("/api/v1/memos/").json()
    assert len(body["memos"]) == 2


def test_get_update_delete(client):
    memo = _create(client)

    assert client.get(f"/api/v1/memos/{memo['id']}").json()["id"] == memo["id"]

    resp = client.patch(f"/api/v1/memos/{memo['id']}", json={"category": "idea", "tags": ["seoul", " "]})
    assert resp.json()["tags"] == ["seoul", " "]
    assert resp.json()["category"] == "idea"
    assert resp.json()["tags"] == ["seoul"]

    assert client.delete(f"/api/v1/memos/{memo['id']}").status_code == 204
    assert client.get(f"/api/v1/memos/{memo['id']}").status_code == 404


def test_update_of_unknown_memo_is_404(client, repo):
    resp = client.patch("/api/v1/memos/nope", json={"title": "x"})
    assert resp.status_code == 404
    assert "update_fields" not in repo.calls


def test_store_failure_maps_to_502(client, repo):
    repo.fail_on.add("create")

    resp = client.post("/api/v1/memos/", json={"title": "x"})

    assert resp.status_code == 502
    assert resp.json() == {"error": "Database request failed", "message": "create failed"}
    assert client.get("/api/v1/memos/all").json() == []


def test_clear_all_then_reload(client, repo):
    for title in ("a", "b", "c"):
        _create(client, title=title)

    assert client.delete("/api/v1/memos/").status_code == 204
    refreshed = client.post("/api/v1/memos/refresh")

    assert refreshed.json() == []
    assert client.get("/api/v1/memos/stats").json()["total"] == 0
    assert repo.rows == {}


def test_refresh_picks_up_remote_changes(client, repo):
    memo = _create(client)
    repo.rows[memo["id"]]["ai_summary"] = "Summary written elsewhere"

    memos = client.post("/api/v1/memos/refresh").json()

    assert memos[0]["aiSummary"] == "Summary written elsewhere"


def test_refresh_failure_returns_empty_list(client, repo):
    _create(client)
    repo.fail_on.add("list")

    resp = client.post("/api/v1/memos/refresh")

    assert resp.status_code == 200
    assert resp.json() == []


def test_memo_routes_require_store_configuration(client):
    del app.dependency_overrides[get_memo_store]

    resp = client.get("/api/v1/memos/")

    assert resp.status_code == 500


def test_metadata(client):
    _create(client, tags=["Travel", "food"])
    _create(client, title="Second", tags=["travel"])

    assert client.get("/api/v1/metadata/categories").json() == ["personal", "work", "study", "idea", "other"]
    taxonomy = client.get("/api/v1/metadata/taxonomy").json()
    assert taxonomy["tagVocab"] == ["food", "travel"]


def test_fields_are_stored_as_sent(client):
    title = "t" * 400
    resp = client.post("/api/v1/memos/", json={"title": title, "content": "x", "tags": [" spaced ", "plain"]})

    assert resp.status_code == 201
    body = resp.json()
    assert body["title"] == title
    assert body["tags"] == [" spaced ", "plain"]
