from blogexpress.services.broadcaster import broadcaster
from tests.conftest import make_category, make_post, make_user


def test_create_and_fetch_category(client):
    category = make_category(client)

    assert client.get(f"/api/categories/{category['id']}").json()["slug"] == "category-1"
    assert client.get("/api/categories/slug/category-1").json()["id"] == category["id"]


def test_missing_category_is_404(client):
    assert client.get("/api/categories/5").status_code == 404
    res = client.get("/api/categories/slug/nope")
    assert res.status_code == 404
    assert res.json()["message"] == "Category not found"


def test_duplicate_slug_rejected(client):
    make_category(client)
    res = client.post("/api/categories", json={"name": "Another", "slug": "category-1"})
    assert res.status_code == 400
    assert res.json()["message"] == "Category slug already exists"


def test_duplicate_name_rejected(client):
    make_category(client)
    res = client.post("/api/categories", json={"name": "Category 1", "slug": "fresh"})
    assert res.status_code == 400
    assert res.json()["message"] == "Category name already exists"


def test_update_category_slug_uniqueness(client):
    make_category(client, n=1)
    second = make_category(client, n=2)

    res = client.put(f"/api/categories/{second['id']}", json={"slug": "category-1"})
    assert res.status_code == 400

    res = client.put(f"/api/categories/{second['id']}", json={"description": "changed"})
    assert res.status_code == 200
    assert res.json()["description"] == "changed"
    assert res.json()["slug"] == "category-2"


def test_update_missing_category_is_404(client):
    assert client.put("/api/categories/9", json={"name": "x"}).status_code == 404


def test_delete_category(client):
    category = make_category(client)
    res = client.delete(f"/api/categories/{category['id']}")
    assert res.status_code == 200
    assert res.json() == {"success": True}
    assert client.get("/api/categories").json() == []
    assert client.delete(f"/api/categories/{category['id']}").status_code == 404


def test_delete_category_with_posts_refused(client):
    user = make_user(client)
    category = make_category(client)
    make_post(client, category["id"], user["id"], n=1)
    make_post(client, category["id"], user["id"], n=2)

    res = client.delete(f"/api/categories/{category['id']}")
    assert res.status_code == 400
    assert res.json() == {"message": "Cannot delete category with existing posts", "count": 2}


def test_category_changes_are_broadcast(client):
    category = make_category(client)
    client.put(f"/api/categories/{category['id']}", json={"description": "new"})
    client.delete(f"/api/categories/{category['id']}")

    events = broadcaster.history
    assert [e.type for e in events] == ["category_created", "category_updated", "category_deleted"]
    assert events[0].data["slug"] == "category-1"
    assert events[2].data == {"id": category["id"]}


def test_missing_category_is_404_before_body_validation(client):
    res = client.put("/api/categories/9", json={"name": ""})
    assert res.status_code == 404
    assert res.json() == {"message": "Category not found"}
