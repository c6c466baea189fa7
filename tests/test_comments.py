import pytest

from blogexpress.services.broadcaster import broadcaster
from tests.conftest import make_category, make_comment, make_post, make_user


@pytest.fixture
def post(client):
    user = make_user(client)
    category = make_category(client)
    return make_post(client, category["id"], user["id"])


def test_create_comment_defaults(client, post):
    comment = make_comment(client, post["id"], post["authorId"])
    assert comment["isApproved"] is True
    assert comment["parentId"] is None
    assert comment["postId"] == post["id"]


def test_comment_reference_checks(client, post):
    author_id = post["authorId"]

    res = client.post("/api/comments", json={"content": "x", "postId": 999, "authorId": author_id})
    assert res.json() == {"message": "Invalid post ID"}

    res = client.post("/api/comments", json={"content": "x", "postId": post["id"], "authorId": 999})
    assert res.json() == {"message": "Invalid author ID"}

    res = client.post("/api/comments", json={
        "content": "x", "postId": post["id"], "authorId": author_id, "parentId": 999,
    })
    assert res.status_code == 400
    assert res.json() == {"message": "Invalid parent comment ID"}


def test_replies_are_one_level_deep(client, post):
    top = make_comment(client, post["id"], post["authorId"])
    reply = make_comment(client, post["id"], post["authorId"], parentId=top["id"])

    res = client.post("/api/comments", json={
        "content": "too deep", "postId": post["id"], "authorId": post["authorId"], "parentId": reply["id"],
    })
    assert res.status_code == 400
    assert res.json()["message"] == "Replies can only be one level deep"


def test_reply_must_share_post(client, post):
    other = make_post(client, post["categoryId"], post["authorId"], n=2)
    top = make_comment(client, post["id"], post["authorId"])

    res = client.post("/api/comments", json={
        "content": "x", "postId": other["id"], "authorId": post["authorId"], "parentId": top["id"],
    })
    assert res.status_code == 400


def test_listing_orders(client, post):
    first = make_comment(client, post["id"], post["authorId"], content="first")
    second = make_comment(client, post["id"], post["authorId"], content="second")
    reply_a = make_comment(client, post["id"], post["authorId"], parentId=first["id"], content="a")
    reply_b = make_comment(client, post["id"], post["authorId"], parentId=first["id"], content="b")

    by_post = [c["id"] for c in client.get(f"/api/comments/post/{post['id']}").json()]
    assert by_post == [first["id"], second["id"], reply_a["id"], reply_b["id"]]

    everything = [c["id"] for c in client.get("/api/comments").json()]
    assert everything == list(reversed(by_post))

    by_author = [c["id"] for c in client.get(f"/api/comments/author/{post['authorId']}").json()]
    assert by_author == everything

    replies = [c["id"] for c in client.get(f"/api/comments/replies/{first['id']}").json()]
    assert replies == [reply_a["id"], reply_b["id"]]


def test_get_and_update_comment(client, post):
    comment = make_comment(client, post["id"], post["authorId"])
    assert client.get(f"/api/comments/{comment['id']}").json()["content"] == "Nice post"

    res = client.put(f"/api/comments/{comment['id']}", json={"content": "Edited", "isApproved": False})
    assert res.status_code == 200
    assert res.json()["content"] == "Edited"
    assert res.json()["isApproved"] is False


def test_missing_comment_is_404(client):
    assert client.get("/api/comments/3").json() == {"message": "Comment not found"}
    assert client.put("/api/comments/3", json={"content": "x"}).status_code == 404
    assert client.delete("/api/comments/3").status_code == 404


def test_delete_comment_removes_replies(client, post):
    top = make_comment(client, post["id"], post["authorId"])
    make_comment(client, post["id"], post["authorId"], parentId=top["id"])
    other = make_comment(client, post["id"], post["authorId"])

    res = client.delete(f"/api/comments/{top['id']}")
    assert res.json() == {"success": True}
    assert [c["id"] for c in client.get("/api/comments").json()] == [other["id"]]
    assert client.get(f"/api/comments/replies/{top['id']}").json() == []


def test_missing_comment_is_404_before_body_validation(client):
    res = client.put("/api/comments/3", json={"isApproved": "maybe"})
    assert res.status_code == 404
    assert res.json() == {"message": "Comment not found"}


def test_comment_changes_are_broadcast(client, post):
    comment = make_comment(client, post["id"], post["authorId"])
    client.put(f"/api/comments/{comment['id']}", json={"content": "Edited"})
    client.delete(f"/api/comments/{comment['id']}")

    events = [e for e in broadcaster.history if e.type.startswith("comment_")]
    assert [e.type for e in events] == ["comment_created", "comment_updated", "comment_deleted"]
    assert events[0].data["postId"] == post["id"]
    assert events[1].data["content"] == "Edited"
    assert events[2].data == {"id": comment["id"]}
