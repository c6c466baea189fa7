from tests.conftest import make_category, make_comment, make_post, make_user


def test_empty_stats(client):
    res = client.get("/api/dashboard/stats")
    assert res.status_code == 200
    assert res.json() == {
        "posts": {"published": 0, "drafts": 0, "total": 0},
        "comments": 0,
        "categories": 0,
        "users": 0,
    }


def test_stats_count_every_table(client):
    author = make_user(client, n=1)
    make_user(client, n=2)
    category = make_category(client, n=1)
    make_category(client, n=2)
    make_category(client, n=3)
    published = make_post(client, category["id"], author["id"], n=1, status="published")
    make_post(client, category["id"], author["id"], n=2)
    make_post(client, category["id"], author["id"], n=3)
    make_comment(client, published["id"], author["id"])

    assert client.get("/api/dashboard/stats").json() == {
        "posts": {"published": 1, "drafts": 2, "total": 3},
        "comments": 1,
        "categories": 3,
        "users": 2,
    }


def test_health_check(client):
    assert client.get("/").json() == {"status": "ok"}
