from tests.conftest import make_user, make_post, make_category, make_comment


def test_create_user_returns_camel_case_without_password(client):
    user = make_user(client, bio="hello")

    assert user["id"] > 0
    assert user["username"] == "writer1"
    assert user["role"] == "user"
    assert user["bio"] == "hello"
    assert "createdAt" in user
    assert "password" not in user


def test_duplicate_username_rejected(client):
    make_user(client)
    res = client.post("/api/users", json={
        "username": "writer1", "password": "x", "name": "Other", "email": "other@example.com",
    })
    assert res.status_code == 400
    assert res.json()["message"] == "Username already taken"


def test_duplicate_email_rejected(client):
    make_user(client)
    res = client.post("/api/users", json={
        "username": "someone", "password": "x", "name": "Other", "email": "writer1@example.com",
    })
    assert res.status_code == 400
    assert res.json()["message"] == "Email already registered"


def test_invalid_user_payload_is_400(client):
    res = client.post("/api/users", json={"username": "x"})
    assert res.status_code == 400
    body = res.json()
    assert body["message"] == "Invalid user data"
    assert body["errors"]

    res = client.post("/api/users", json={
        "username": "x", "password": "x", "name": "X", "email": "not-an-email",
    })
    assert res.status_code == 400


def test_get_missing_user_is_404(client):
    res = client.get("/api/users/999")
    assert res.status_code == 404
    assert res.json() == {"message": "User not found"}


def test_list_users(client):
    make_user(client, n=1)
    make_user(client, n=2)
    res = client.get("/api/users")
    assert res.status_code == 200
    assert [u["username"] for u in res.json()] == ["writer1", "writer2"]


def test_update_user_partial(client):
    user = make_user(client)
    res = client.put(f"/api/users/{user['id']}", json={"bio": "updated", "role": "admin"})
    assert res.status_code == 200
    body = res.json()
    assert body["bio"] == "updated"
    assert body["role"] == "admin"
    assert body["username"] == "writer1"


def test_update_user_keeping_own_username_is_allowed(client):
    user = make_user(client)
    res = client.put(f"/api/users/{user['id']}", json={"username": "writer1", "email": "writer1@example.com"})
    assert res.status_code == 200


def test_update_user_to_taken_username_rejected(client):
    make_user(client, n=1)
    other = make_user(client, n=2)
    res = client.put(f"/api/users/{other['id']}", json={"username": "writer1"})
    assert res.status_code == 400
    assert res.json()["message"] == "Username already taken"


def test_update_user_null_required_field_rejected(client):
    user = make_user(client)
    res = client.put(f"/api/users/{user['id']}", json={"name": None})
    assert res.status_code == 400


def test_update_missing_user_is_404(client):
    res = client.put("/api/users/42", json={"bio": "x"})
    assert res.status_code == 404


def test_delete_user(client):
    user = make_user(client)
    res = client.delete(f"/api/users/{user['id']}")
    assert res.status_code == 200
    assert res.json() == {"success": True}
    assert client.get(f"/api/users/{user['id']}").status_code == 404


def test_delete_user_with_posts_refused(client):
    user = make_user(client)
    category = make_category(client)
    make_post(client, category["id"], user["id"])

    res = client.delete(f"/api/users/{user['id']}")
    assert res.status_code == 400
    assert res.json() == {"message": "Cannot delete user with existing posts", "count": 1}


def test_delete_user_with_comments_refused(client):
    author = make_user(client, n=1)
    commenter = make_user(client, n=2)
    category = make_category(client)
    post = make_post(client, category["id"], author["id"])
    make_comment(client, post["id"], commenter["id"])

    res = client.delete(f"/api/users/{commenter['id']}")
    assert res.status_code == 400
    assert res.json() == {"message": "Cannot delete user with existing comments", "count": 1}


def test_missing_user_is_404_before_body_validation(client):
    res = client.put("/api/users/42", json={"email": "not-an-email"})
    assert res.status_code == 404
    assert res.json() == {"message": "User not found"}
