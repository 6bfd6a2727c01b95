# backend/tests/test_api.py
from jsonmock.crud.defaults import BUILTIN_TEMPLATE_IDS

BLOG_FIELDS = [
    {"id": 1, "name": "id", "type": "number", "isPrimaryKey": True},
    {"id": 2, "name": "title", "type": "string"},
    {"id": 3, "name": "tags", "type": "array", "arrayItemType": "string"},
]


# ---------- Preview ----------

def test_preview_returns_descriptor_and_flags(client):
    resp = client.post("/api/v1/schema/preview", json={"fields": BLOG_FIELDS})
    assert resp.status_code == 200
    body = resp.json()
    assert body["schema"] == {"id": "number", "title": "string", "tags": ["string"]}
    assert body["hasValidFields"] is True
    assert body["hasPrimaryKey"] is True


def test_preview_tolerates_incomplete_tree(client):
    resp = client.post("/api/v1/schema/preview", json={"fields": [{"name": "", "type": "array"}]})
    assert resp.status_code == 200
    body = resp.json()
    assert body["schema"] == {"": ["string"]}
    assert body["hasValidFields"] is False
    assert body["hasPrimaryKey"] is False


# ---------- Generate ----------

def test_generate_single_record(client):
    resp = client.post("/api/v1/generate", json={"fields": BLOG_FIELDS, "count": 1})
    assert resp.status_code == 200
    body = resp.json()
    assert isinstance(body, dict)
    assert body["id"] == 1


def test_generate_many_records(client):
    resp = client.post("/api/v1/generate", json={"fields": BLOG_FIELDS, "count": 4})
    assert resp.status_code == 200
    assert [r["id"] for r in resp.json()] == [1, 2, 3, 4]


def test_generate_clamps_count(client):
    too_many = client.post("/api/v1/generate", json={"fields": BLOG_FIELDS, "count": 500})
    assert len(too_many.json()) == 100

    too_few = client.post("/api/v1/generate", json={"fields": BLOG_FIELDS, "count": 0})
    assert isinstance(too_few.json(), dict)


def test_generate_with_seed_is_repeatable(client):
    payload = {"fields": BLOG_FIELDS, "count": 5, "seed": 123}
    first = client.post("/api/v1/generate", json=payload).json()
    second = client.post("/api/v1/generate", json=payload).json()
    assert first == second


def test_generate_rejects_unusable_trees(client):
    assert client.post("/api/v1/generate", json={"fields": []}).status_code == 400
    blank = client.post("/api/v1/generate", json={"fields": [{"name": " ", "type": "string"}]})
    assert blank.status_code == 400


def test_generate_rejects_malformed_body(client):
    resp = client.post("/api/v1/generate", json={"fields": [{"name": "x"}]})
    assert resp.status_code == 422


# ---------- Templates ----------

def test_builtins_listed_when_store_empty(client):
    resp = client.get("/api/v1/templates")
    assert resp.status_code == 200
    ids = [t["id"] for t in resp.json()]
    assert set(ids) == set(BUILTIN_TEMPLATE_IDS)
    assert all(t["builtin"] for t in resp.json())


def test_save_then_list_puts_user_templates_first(client):
    saved = client.post("/api/v1/templates", json={"name": "Blog", "schema": BLOG_FIELDS})
    assert saved.status_code == 201
    template = saved.json()
    assert template["name"] == "Blog"
    assert template["builtin"] is False
    assert template["schema"][0]["isPrimaryKey"] is True
    assert "createdAt" in template

    listing = client.get("/api/v1/templates").json()
    assert listing[0]["id"] == template["id"]
    assert len(listing) == 1 + len(BUILTIN_TEMPLATE_IDS)


def test_load_template_schema(client):
    template_id = client.post("/api/v1/templates", json={"name": "Blog", "schema": BLOG_FIELDS}).json()["id"]

    resp = client.get(f"/api/v1/templates/{template_id}/schema")
    assert resp.status_code == 200
    assert [f["name"] for f in resp.json()] == ["id", "title", "tags"]
    assert resp.json()[2]["arrayItemType"] == "string"

    builtin = client.get("/api/v1/templates/default-order/schema").json()
    assert builtin[2]["arrayItemSchema"][0]["name"] == "productId"


def test_get_unknown_template_is_404(client):
    assert client.get("/api/v1/templates/nope").status_code == 404
    assert client.get("/api/v1/templates/nope/schema").status_code == 404


def test_delete_template(client):
    template_id = client.post("/api/v1/templates", json={"name": "Blog", "schema": BLOG_FIELDS}).json()["id"]

    resp = client.delete(f"/api/v1/templates/{template_id}")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}
    assert client.get(f"/api/v1/templates/{template_id}").status_code == 404
    assert client.delete(f"/api/v1/templates/{template_id}").status_code == 404


def test_builtin_templates_cannot_be_deleted(client):
    assert client.delete("/api/v1/templates/default-product").status_code == 400
    assert client.get("/api/v1/templates/default-product").status_code == 200


def test_save_requires_name(client):
    resp = client.post("/api/v1/templates", json={"name": "   ", "schema": BLOG_FIELDS})
    assert resp.status_code == 422


def test_generate_from_loaded_builtin(client):
    fields = client.get("/api/v1/templates/default-blog-post/schema").json()
    records = client.post("/api/v1/generate", json={"fields": fields, "count": 3}).json()
    assert [r["id"] for r in records] == [1, 2, 3]
    assert set(records[0]["author"]) == {"name", "email"}


# ---------- Service ----------

def test_root(client):
    body = client.get("/").json()
    assert body["docs"] == "/docs"
