# tests/test_members_api.py
from fastapi.testclient import TestClient

from ministry.main import app

client = TestClient(app)


def _create(**overrides):
    payload = {
        "first_name": "Grace",
        "last_name": "Otieno",
        "email": "grace@example.org",
        "occupation": "Registered Nurse",
        "date_of_birth": "1990-06-15",
    }
    payload.update(overrides)
    return client.post("/members/", json=payload)


def test_create_get_and_duplicate_email():
    r = _create(email="Grace@Example.org")
    assert r.status_code == 201, r.text
    member = r.json()
    assert member["email"] == "grace@example.org"
    assert member["tier"] == "free"
    assert member["spiritual_profile"] is None

    r = client.get(f"/members/{member['id']}")
    assert r.status_code == 200
    assert r.json()["occupation"] == "Registered Nurse"

    dup = _create()
    assert dup.status_code == 409


def test_list_search_and_tier_filter():
    _create()
    _create(first_name="Peter", last_name="Kamau", email="peter@example.org", tier="covenant")

    r = client.get("/members/", params={"q": "kamau"})
    assert [m["first_name"] for m in r.json()] == ["Peter"]

    r = client.get("/members/", params={"tier": "covenant"})
    assert len(r.json()) == 1

    r = client.get("/members/")
    assert [m["last_name"] for m in r.json()] == ["Kamau", "Otieno"]


def test_patch_and_missing_member():
    member = _create().json()
    r = client.patch(f"/members/{member['id']}", json={"occupation": "Teacher"})
    assert r.status_code == 200
    assert r.json()["occupation"] == "Teacher"
    assert r.json()["first_name"] == "Grace"

    assert client.get("/members/9999").status_code == 404
    assert client.patch("/members/9999", json={"phone": "1"}).status_code == 404


def test_invalid_payload_rejected():
    r = _create(email="not-an-email")
    assert r.status_code == 422


def test_spiritual_profile_and_engagement():
    member = _create().json()

    r = client.get(f"/member-care/members/{member['id']}/engagement")
    assert r.json()["engagement_score"] == 0
    assert r.json()["band"] == "Low"

    r = client.put(
        f"/members/{member['id']}/spiritual-profile",
        json={
            "primary_gift": "Mercy",
            "current_season": "Growth",
            "total_devotionals_read": 6,
            "total_journal_entries": 3,
            "total_prayers_submitted": 4,
        },
    )
    assert r.status_code == 200, r.text
    assert r.json()["member_id"] == member["id"]

    r = client.get(f"/member-care/members/{member['id']}/engagement")
    assert r.json()["engagement_score"] == 100
    assert r.json()["band"] == "High"

    # second put updates in place
    r = client.put(
        f"/members/{member['id']}/spiritual-profile",
        json={"total_devotionals_read": 8},
    )
    assert r.status_code == 200
    r = client.get(f"/member-care/members/{member['id']}/engagement")
    assert r.json()["engagement_score"] == 30

    assert client.put("/members/9999/spiritual-profile", json={}).status_code == 404
    assert client.get("/member-care/members/9999/engagement").status_code == 404


def test_negative_counters_rejected():
    member = _create().json()
    r = client.put(
        f"/members/{member['id']}/spiritual-profile",
        json={"total_prayers_submitted": -1},
    )
    assert r.status_code == 422


def test_engagement_board():
    a = _create().json()
    _create(first_name="Peter", last_name="Kamau", email="peter@example.org")
    client.put(
        f"/members/{a['id']}/spiritual-profile",
        json={"total_journal_entries": 4, "primary_gift": "Teaching"},
    )

    r = client.get("/member-care/engagement")
    assert r.status_code == 200
    board = r.json()
    assert board["total_members"] == 2
    assert board["active_members"] == 1
    assert board["by_band"] == {"High": 0, "Medium": 1, "Low": 1}


def test_celebrations_endpoints():
    _create()  # birthday 06-15
    _create(
        first_name="Peter",
        last_name="Kamau",
        email="peter@example.org",
        date_of_birth="1980-06-01",
        wedding_anniversary="2010-06-20",
    )
    _create(first_name="Nobody", last_name="Dates", email="nobody@example.org", date_of_birth=None)

    r = client.get("/member-care/celebrations", params={"today": "2025-06-10"})
    assert r.status_code == 200, r.text
    rows = r.json()
    assert len(rows) == 1
    assert rows[0]["first_name"] == "Grace"
    assert rows[0]["days_until"] == 5
    assert rows[0]["turning"] == 35
    assert rows[0]["this_week"] is True
    assert rows[0]["next_date"] == "2025-06-15"

    r = client.get(
        "/member-care/celebrations", params={"today": "2025-06-10", "kind": "anniversary"}
    )
    rows = r.json()
    assert [row["first_name"] for row in rows] == ["Peter"]
    assert rows[0]["turning"] == 15

    r = client.get("/member-care/celebrations", params={"kind": "graduation"})
    assert r.status_code == 422

    r = client.get("/member-care/celebrations/stats", params={"today": "2025-06-10"})
    assert r.json() == {
        "birthdays_this_week": 1,
        "birthdays_upcoming": 1,
        "anniversaries_this_week": 0,
        "anniversaries_upcoming": 1,
        "membership_milestones": 0,
    }
