"""Profile listing and fetch tests."""

from datetime import datetime


def _insert(store, email, created_at, **fields):
    record = {
        "name": fields.pop("name", email.split("@")[0]),
        "email": email,
        "password_hash": "not-a-real-hash",
        "created_at": created_at,
    }
    record.update(fields)
    return store.insert_one(record)


def test_list_profiles_empty(client):
    response = client.get("/api/profiles")
    assert response.status_code == 200
    assert response.json == []


def test_list_profiles_newest_first(client, store):
    """Records created at t1 < t2 < t3 come back as t3, t2, t1."""
    _insert(store, "two@example.com", datetime(2024, 2, 1))
    _insert(store, "three@example.com", datetime(2024, 3, 1))
    _insert(store, "one@example.com", datetime(2024, 1, 1))

    response = client.get("/api/profiles")
    assert response.status_code == 200
    emails = [profile["email"] for profile in response.json]
    assert emails == ["three@example.com", "two@example.com", "one@example.com"]


def test_list_profiles_registration_order(client, register_user):
    for n in range(3):
        register_user(email=f"user{n}@example.com")
    emails = [profile["email"] for profile in client.get("/api/profiles").json]
    assert emails == ["user2@example.com", "user1@example.com", "user0@example.com"]


def test_list_profiles_are_external(client, register_user):
    register_user(skills=["react"], experience=2)
    profile = client.get("/api/profiles").json[0]
    assert set(profile) == {
        "uid", "name", "email", "city", "skills", "experience", "portfolio", "profilePic", "createdAt",
    }
    assert profile["skills"] == ["react"]
    assert profile["experience"] == 2


def test_get_profile(client, register_user):
    uid = register_user(name="Ravi").json["uid"]
    response = client.get(f"/api/profile/{uid}")
    assert response.status_code == 200
    assert response.json["name"] == "Ravi"
    assert response.json["uid"] == uid
    assert "password_hash" not in response.json


def test_get_profile_not_found(client):
    for uid in ("999", "abc", "-1", "99999999999999999999999"):
        response = client.get(f"/api/profile/{uid}")
        assert response.status_code == 404
        assert response.json["message"] == "User not found."


def test_list_profiles_unexpected_error(client, store, monkeypatch):
    def broken(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(store, "find", broken)
    response = client.get("/api/profiles")
    assert response.status_code == 500
    assert response.json["message"] == "Server error fetching profiles."
