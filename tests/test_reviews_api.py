# tests/test_reviews_api.py
from bson import ObjectId
import pytest

from models.review_models import round_rating, average_rating


def post_review(client, session_id, rating, email="s@example.com"):
    return client.post("/reviews", json={"sessionId": session_id, "studentEmail": email, "rating": rating})


@pytest.mark.parametrize(
    "ratings, expected",
    [
        ([4], 4.0),
        ([5, 4], 4.5),
        ([5, 4, 4], 4.3),
        ([1, 2, 2], 1.7),
    ],
)
def test_average_rating_follows_every_review(client, make_session, database, ratings, expected):
    session_id = make_session()

    for i, rating in enumerate(ratings):
        response = post_review(client, session_id, rating, email=f"s{i}@example.com")
        assert response.status_code == 200

    assert response.get_json()["averageRating"] == expected
    assert database.sessions.find_one({"_id": ObjectId(session_id)})["averageRating"] == expected


def test_average_is_visible_on_session_detail(client, make_session):
    session_id = make_session()
    post_review(client, session_id, 3)

    assert client.get(f"/sessions/{session_id}").get_json()["averageRating"] == 3.0


def test_rating_string_is_coerced(client, make_session, database):
    session_id = make_session()

    response = post_review(client, session_id, "4")

    assert response.status_code == 200
    review = database.reviews.find_one({"_id": ObjectId(response.get_json()["insertedId"])})
    assert review["rating"] == 4.0
    assert isinstance(review["rating"], float)


def test_reviews_of_other_sessions_do_not_count(client, make_session):
    first, second = make_session(), make_session(title="Geometry")
    post_review(client, first, 1)

    response = post_review(client, second, 5)

    assert response.get_json()["averageRating"] == 5.0


@pytest.mark.parametrize("rating", [7, -1, "great", None])
def test_invalid_rating_is_rejected(client, make_session, database, rating):
    session_id = make_session()

    response = post_review(client, session_id, rating)

    assert response.status_code == 400
    assert database.reviews.count_documents({}) == 0


def test_review_needs_existing_session(client, database):
    bad_id = post_review(client, "nope", 4)
    unknown = post_review(client, str(ObjectId()), 4)

    assert bad_id.status_code == 400
    assert unknown.status_code == 404
    assert database.reviews.count_documents({}) == 0


def test_list_session_reviews(client, make_session):
    session_id = make_session()
    post_review(client, session_id, 4, email="a@example.com")
    post_review(client, session_id, 5, email="b@example.com")

    reviews = client.get(f"/sessions/{session_id}/reviews").get_json()

    assert {r["studentEmail"] for r in reviews} == {"a@example.com", "b@example.com"}
    assert client.get(f"/sessions/{ObjectId()}/reviews").get_json() == []


def test_round_rating_rounds_halves_up():
    assert round_rating(4.25) == 4.3
    assert round_rating(4.35) == 4.3
    assert round_rating(4.24) == 4.2


def test_average_rating_of_nothing():
    assert average_rating([]) is None
    assert average_rating([2, 3]) == 2.5


def test_round_rating_uses_exact_float_value():
    # 81 / 20 is stored as 4.0499999...
    assert round_rating(81 / 20) == 4.0
    assert round_rating(4.05) == round(4.05, 1)


def test_average_of_inexact_tie(client, make_session, database):
    session_id = make_session()

    for i, rating in enumerate([4] * 19 + [5]):
        response = post_review(client, session_id, rating, email=f"s{i}@example.com")

    assert response.get_json()["averageRating"] == 4.0
    assert database.sessions.find_one({"_id": ObjectId(session_id)})["averageRating"] == 4.0
