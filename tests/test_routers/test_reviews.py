from bson import ObjectId


async def test_add_review_then_read_room(client, rooms):
    room_id = rooms.sync.insert_one({"price": 100, "reviews": []}).inserted_id

    resp = await client.post(f"/rooms/{room_id}/reviews", json={"comment": "ok"})

    assert resp.status_code == 200
    assert resp.json() == {"message": "Review added successfully"}

    room = (await client.get(f"/rooms/{room_id}")).json()
    assert len(room["reviews"]) == 1
    review = room["reviews"][0]
    assert review["comment"] == "ok"
    assert set(review) == {"comment", "timestamp"}
    assert review["timestamp"].endswith("Z")


async def test_add_review_unknown_room(client, rooms):
    room_id = rooms.sync.insert_one({"reviews": []}).inserted_id

    resp = await client.post(f"/rooms/{ObjectId()}/reviews", json={"comment": "ok"})

    assert resp.status_code == 404
    assert rooms.sync.find_one({"_id": room_id})["reviews"] == []


async def test_add_review_malformed_id(client):
    resp = await client.post("/rooms/xyz/reviews", json={"comment": "ok"})

    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid ID format"


async def test_recent_reviews(client, rooms):
    rooms.sync.insert_many([
        {"reviews": [
            {"comment": f"r{i}", "timestamp": f"2024-06-{i:02d}T10:00:00.000Z"} for i in range(1, 8)
        ]},
        {"reviews": [
            {"comment": f"s{i}", "timestamp": f"2024-05-{i:02d}T10:00:00.000Z"} for i in range(1, 8)
        ]},
    ])

    resp = await client.get("/reviews")

    reviews = resp.json()
    assert resp.status_code == 200
    assert len(reviews) == 10
    assert reviews[0]["comment"] == "r7"
    assert [r["timestamp"] for r in reviews] == sorted((r["timestamp"] for r in reviews), reverse=True)


async def test_recent_reviews_ignores_legacy_string_reviews(client, rooms):
    rooms.sync.insert_one({"reviews": ["legacy text review"]})

    resp = await client.get("/reviews")

    assert resp.status_code == 200
    assert resp.json() == []
