from app.core.models.memo import Memo
from app.dependencies import get_model_client, get_optional_memo_repository
from app.main import app

from tests.fakes import FakeOpenAI

TRIP = {
    "title": "Trip",
    "content": "Planning a trip to Seoul next month to see palaces and try street food",
    "category": "personal",
}


def test_generate_tags_returns_clean_bounded_list(client, fake_model):
    fake_model.responses.output_text = '["#travel", "seoul", "palaces", "food", "#korea", "street"]'

    resp = client.post("/api/v1/generate-tags", json=TRIP)

    assert resp.status_code == 200
    tags = resp.json()["tags"]
    assert 0 < len(tags) <= 5
    assert all(tag and "#" not in tag for tag in tags)


def test_generate_tags_truncates_content_in_prompt(client, fake_model):
    content = "a" * 1000 + "~" * 200

    resp = client.post("/api/v1/generate-tags", json={"title": "Long", "content": content})

    assert resp.status_code == 200
    (prompt,) = fake_model.prompts
    assert "a" * 1000 in prompt
    assert "~" not in prompt


def test_generate_tags_requires_title_and_content(client, fake_model):
    for body in (
        {"title": "Trip"},
        {"content": "body"},
        {"title": "", "content": "body"},
        {"title": "   ", "content": "body"},
        {"title": "Trip", "content": "\n\t "},
    ):
        resp = client.post("/api/v1/generate-tags", json=body)
        assert resp.status_code == 400
        assert "error" in resp.json()
    assert fake_model.prompts == []


def test_generate_tags_parses_replies_leniently(client, fake_model):
    fake_model.responses.output_text = "[not, json"

    resp = client.post("/api/v1/generate-tags", json=TRIP)

    assert resp.status_code == 200
    assert resp.json() == {"tags": ["not", "json"]}

    fake_model.responses.output_text = "[broken, json]"
    assert client.post("/api/v1/generate-tags", json=TRIP).json() == {"tags": []}


def test_generate_tags_without_api_key(client):
    app.dependency_overrides[get_model_client] = lambda: None

    resp = client.post("/api/v1/generate-tags", json=TRIP)

    assert resp.status_code == 500
    assert "error" in resp.json()


def test_generate_tags_model_failure(client):
    app.dependency_overrides[get_model_client] = lambda: FakeOpenAI(error=RuntimeError("upstream down"))

    resp = client.post("/api/v1/generate-tags", json=TRIP)

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to generate tags"}


def _summary_model(text="Seoul trip next month for palaces and street food."):
    model = FakeOpenAI(output_text=text)
    app.dependency_overrides[get_model_client] = lambda: model
    return model


def test_summarize_saves_on_existing_memo(client, repo, store):
    model = _summary_model()
    memo = Memo(id="m1", title="Trip", content=TRIP["content"])
    repo.rows["m1"] = {**memo.model_dump(mode="json")}

    resp = client.post(
        "/api/v1/memos/summarize",
        json={"content": TRIP["content"], "title": "Trip", "memoId": "m1"},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body == {"summary": "Seoul trip next month for palaces and street food.", "saved": True}
    assert repo.rows["m1"]["ai_summary"] == body["summary"]
    assert store.get_by_id("m1").ai_summary == body["summary"]
    assert "Title: Trip" in model.prompts[0]
    assert TRIP["content"] in model.prompts[0]


def test_summarize_unknown_memo_reports_not_found(client):
    _summary_model()

    resp = client.post("/api/v1/memos/summarize", json={"content": "some text", "memoId": "missing"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["saved"] is False
    assert "not found" in body["saveError"].lower()
    assert body["summary"]


def test_summarize_without_memo_id_flags_unsaved(client, repo):
    model = _summary_model()

    resp = client.post("/api/v1/memos/summarize", json={"content": "some text"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["saved"] is False
    assert "memoId" in body["saveError"]
    assert "update_fields" not in repo.calls
    assert "Title:" not in model.prompts[0]


def test_summarize_store_error_is_reported_not_raised(client, repo):
    _summary_model()
    repo.rows["m1"] = Memo(id="m1", content="x").model_dump(mode="json")
    repo.fail_on.add("update_fields")

    resp = client.post("/api/v1/memos/summarize", json={"content": "x", "memoId": "m1"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["saved"] is False
    assert body["saveError"] == "Database save failed: update_fields failed"
    assert body["summary"]


def test_summarize_without_store_credentials(client):
    _summary_model()
    app.dependency_overrides[get_optional_memo_repository] = lambda: None

    resp = client.post("/api/v1/memos/summarize", json={"content": "x", "memoId": "m1"})

    assert resp.status_code == 200
    assert resp.json()["saveError"] == "Supabase credentials are not configured"


def test_summarize_requires_content(client, fake_model):
    for body in ({"title": "Only a title"}, {"content": ""}, {"content": "   \n"}):
        resp = client.post("/api/v1/memos/summarize", json=body)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Content is required"}
    assert fake_model.prompts == []


def test_summarize_model_failure(client):
    app.dependency_overrides[get_model_client] = lambda: FakeOpenAI(error=RuntimeError("quota exceeded"))

    resp = client.post("/api/v1/memos/summarize", json={"content": "x"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to generate summary", "message": "quota exceeded"}


def test_summarize_without_api_key(client):
    app.dependency_overrides[get_model_client] = lambda: None

    resp = client.post("/api/v1/memos/summarize", json={"content": "x"})

    assert resp.status_code == 500
    assert set(resp.json()) == {"error", "message"}
