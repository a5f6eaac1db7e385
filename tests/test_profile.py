from __future__ import annotations

from sqlalchemy import text

from app.config import settings
from app.database import SessionLocal
from app.models.post import Post
from app.models.profile import Profile
from app.models.user import User


EXPERIENCE = {"title": "Engineer", "company": "Acme", "from": "2020-01-01"}
EDUCATION = {"school": "State U", "degree": "BSc", "fieldofstudy": "CS", "from": "2014-09-01", "to": "2018-06-30"}


def _create_profile(client, headers, **extra) -> dict:
    payload = {"position": "Engineer", "skills": "go,rust", **extra}
    r = client.post("/profile", json=payload, headers=headers)
    assert r.status_code == 200, r.text
    return r.json()


def test_register_create_profile_and_read_me(client, register) -> None:
    headers = register("flow@example.com", name="Flow User")
    _create_profile(client, headers)

    r = client.get("/profile/me", headers=headers)
    assert r.status_code == 200
    body = r.json()
    assert body["skills"] == ["go", "rust"]
    assert body["experience"] == []
    assert body["education"] == []
    assert body["user"]["name"] == "Flow User"
    assert body["user"]["avatar"]


def test_profile_me_without_profile(client, register) -> None:
    headers = register("empty@example.com")
    r = client.get("/profile/me", headers=headers)
    assert r.status_code == 400
    assert r.json()["detail"] == "There is no profile for this user"


def test_profile_requires_position_and_skills(client, register) -> None:
    headers = register("invalid@example.com")
    r = client.post("/profile", json={"company": "Acme"}, headers=headers)
    assert r.status_code == 400
    assert {e["field"] for e in r.json()["errors"]} == {"position", "skills"}

    r = client.post("/profile", json={"position": " ", "skills": " , "}, headers=headers)
    assert r.status_code == 400
    messages = {e["msg"] for e in r.json()["errors"]}
    assert messages == {"Position is required", "Skills is required"}


def test_skills_are_split_and_trimmed(client, register) -> None:
    headers = register("skills@example.com")
    body = _create_profile(client, headers, skills="a, b ,c")
    assert body["skills"] == ["a", "b", "c"]

    body = _create_profile(client, headers, skills=[" x ", "y"])
    assert body["skills"] == ["x", "y"]


def test_update_keeps_omitted_fields(client, register) -> None:
    headers = register("update@example.com")
    first = _create_profile(
        client,
        headers,
        company="Acme",
        website="https://acme.test",
        location="Berlin",
        bio="Hello",
        twitter="https://twitter.com/acme",
    )
    assert first["location"] == "Berlin"
    assert first["website"] == "https://acme.test"

    second = _create_profile(client, headers, position="Lead", skills="python", youtube="https://youtube.com/acme")
    assert second["id"] == first["id"]
    assert second["position"] == "Lead"
    assert second["skills"] == ["python"]
    assert second["company"] == "Acme"
    assert second["location"] == "Berlin"
    assert second["bio"] == "Hello"
    assert second["social"]["twitter"] == "https://twitter.com/acme"
    assert second["social"]["youtube"] == "https://youtube.com/acme"

    with SessionLocal() as db:
        assert db.query(Profile).count() == 1


def test_explicit_empty_value_is_written(client, register) -> None:
    headers = register("blank@example.com")
    _create_profile(client, headers, bio="Something")
    body = _create_profile(client, headers, bio="")
    assert body["bio"] == ""


def test_list_profiles_is_public(client, register) -> None:
    _create_profile(client, register("one@example.com", name="One"))
    _create_profile(client, register("two@example.com", name="Two"))

    r = client.get("/profile")
    assert r.status_code == 200
    assert [p["user"]["name"] for p in r.json()] == ["One", "Two"]


def test_profile_by_user_id(client, register) -> None:
    headers = register("byid@example.com")
    created = _create_profile(client, headers)
    user_id = created["user"]["id"]

    r = client.get(f"/profile/user/{user_id}")
    assert r.status_code == 200
    assert r.json()["id"] == created["id"]

    for bad in ("not-an-id", "424242"):
        r = client.get(f"/profile/user/{bad}")
        assert r.status_code == 400
        assert r.json()["detail"] == "Profile not found"


def test_experience_is_prepended_and_removable(client, register) -> None:
    headers = register("exp@example.com")
    _create_profile(client, headers)

    r = client.put("/profile/experience", json=EXPERIENCE, headers=headers)
    assert r.status_code == 200
    e1 = r.json()["experience"][0]
    assert e1["from"] == "2020-01-01"
    assert e1["current"] is False

    r = client.put("/profile/experience", json={**EXPERIENCE, "title": "Senior Engineer"}, headers=headers)
    titles = [e["title"] for e in r.json()["experience"]]
    assert titles == ["Senior Engineer", "Engineer"]

    r = client.delete("/profile/experience/does-not-exist", headers=headers)
    assert r.status_code == 400
    assert r.json()["detail"] == "Experience not found"
    assert len(client.get("/profile/me", headers=headers).json()["experience"]) == 2

    r = client.delete(f"/profile/experience/{e1['id']}", headers=headers)
    assert r.status_code == 200
    assert [e["title"] for e in r.json()["experience"]] == ["Senior Engineer"]


def test_experience_requires_fields(client, register) -> None:
    headers = register("expval@example.com")
    _create_profile(client, headers)
    r = client.put("/profile/experience", json={"title": ""}, headers=headers)
    assert r.status_code == 400
    assert {e["field"] for e in r.json()["errors"]} == {"title", "company", "from"}


def test_sub_records_need_existing_profile(client, register) -> None:
    headers = register("noprofile@example.com")
    r = client.put("/profile/experience", json=EXPERIENCE, headers=headers)
    assert r.status_code == 400
    assert r.json()["detail"] == "There is no profile for this user"

    r = client.put("/profile/education", json=EDUCATION, headers=headers)
    assert r.status_code == 400


def test_education_add_and_remove(client, register) -> None:
    headers = register("edu@example.com")
    _create_profile(client, headers)

    r = client.put("/profile/education", json=EDUCATION, headers=headers)
    assert r.status_code == 200
    entry = r.json()["education"][0]
    assert entry["fieldofstudy"] == "CS"
    assert entry["to"] == "2018-06-30"

    r = client.put("/profile/education", json={"school": "State U"}, headers=headers)
    assert r.status_code == 400
    assert {e["field"] for e in r.json()["errors"]} == {"degree", "fieldofstudy", "from"}

    r = client.delete("/profile/education/unknown", headers=headers)
    assert r.status_code == 400
    assert r.json()["detail"] == "Education not found"

    r = client.delete(f"/profile/education/{entry['id']}", headers=headers)
    assert r.status_code == 200
    assert r.json()["education"] == []


def test_delete_account_removes_profile_user_and_posts(client, register) -> None:
    headers = register("leaver@example.com")
    stayer = register("stayer@example.com")
    _create_profile(client, headers)
    client.post("/posts", json={"text": "bye"}, headers=headers)
    client.post("/posts", json={"text": "still here"}, headers=stayer)

    r = client.delete("/profile", headers=headers)
    assert r.status_code == 200
    assert r.json() == {"msg": "User deleted"}

    with SessionLocal() as db:
        assert db.query(User).filter(User.email == "leaver@example.com").count() == 0
        assert db.query(Profile).count() == 0
        assert [p.text for p in db.query(Post).all()] == ["still here"]

    # The token now points at a removed account.
    assert client.get("/profile/me", headers=headers).status_code == 401


def test_delete_account_can_keep_posts(client, register, monkeypatch) -> None:
    monkeypatch.setattr(settings, "cascade_delete_posts", False)
    headers = register("keeper@example.com", name="Keeper")
    reader = register("reader2@example.com")
    _create_profile(client, headers)
    post_id = client.post("/posts", json={"text": "outlives me"}, headers=headers).json()["id"]

    with SessionLocal() as db:
        # Same foreign-key behaviour as InnoDB.
        assert db.execute(text("PRAGMA foreign_keys")).scalar() == 1

    r = client.delete("/profile", headers=headers)
    assert r.status_code == 200

    with SessionLocal() as db:
        assert db.query(User).filter(User.email == "keeper@example.com").count() == 0
        assert db.query(Profile).count() == 0
        kept = db.query(Post).one()
        assert kept.user_id is None

    r = client.get(f"/posts/{post_id}", headers=reader)
    assert r.status_code == 200
    body = r.json()
    assert body["user"] is None
    assert body["name"] == "Keeper"
    assert body["text"] == "outlives me"
