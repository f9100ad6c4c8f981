# scripts/smoke_member_care.py
# Quick end-to-end smoke test for member-care and mission-trip endpoints.
# Requires: pip install requests ; a running server (uvicorn ministry.main:app)

import os
import sys
import uuid
from datetime import date, timedelta

import requests


BASE = os.getenv("MINISTRY_API", "http://127.0.0.1:8000")


def must_ok(r: requests.Response, code: int = 200):
    try:
        r.raise_for_status()
    except Exception as e:
        print("✗ HTTP error:", e)
        print("→ URL:", r.request.method, r.request.url)
        if r.content:
            print("→ Body:", r.text[:1000])
        sys.exit(1)
    if r.status_code != code:
        print(f"✗ Expected {code} got {r.status_code} for {r.request.method} {r.request.url}")
        print("→ Body:", r.text[:1000])
        sys.exit(1)


def main():
    print(f"→ Using API {BASE}")

    # Unique email so repeated runs don't collide
    tag = uuid.uuid4().hex[:8]
    today = date.today()
    dob = (today + timedelta(days=3)).replace(year=today.year - 30)

    r = requests.post(f"{BASE}/members/", json={
        "first_name": "Smoke",
        "last_name": f"Nurse-{tag}",
        "email": f"smoke-{tag}@example.org",
        "occupation": "Registered Nurse",
        "date_of_birth": dob.isoformat(),
    })
    must_ok(r, 201)
    member = r.json()
    print(f"✓ member {member['id']} created")

    r = requests.put(f"{BASE}/members/{member['id']}/spiritual-profile", json={
        "primary_gift": "Mercy",
        "total_devotionals_read": 6,
        "total_journal_entries": 1,
    })
    must_ok(r)

    r = requests.get(f"{BASE}/member-care/members/{member['id']}/engagement")
    must_ok(r)
    eng = r.json()
    assert eng["engagement_score"] == 50, eng
    assert eng["band"] == "Medium", eng
    print(f"✓ engagement {eng['engagement_score']} ({eng['band']})")

    r = requests.get(f"{BASE}/member-care/celebrations", params={"kind": "birthday", "today": today.isoformat()})
    must_ok(r)
    ours = [c for c in r.json() if c["member_id"] == member["id"]]
    assert ours and ours[0]["this_week"], ours
    print(f"✓ birthday in {ours[0]['days_until']} days, turning {ours[0]['turning']}")

    r = requests.post(f"{BASE}/mission-trips/", json={
        "name": f"SMOKE Trip {tag}",
        "destination": "Nairobi",
        "start_date": (today + timedelta(days=60)).isoformat(),
        "end_date": (today + timedelta(days=76)).isoformat(),
        "fundraising_goal": 50000,
    })
    must_ok(r, 201)
    trip = r.json()

    r = requests.post(f"{BASE}/mission-trips/{trip['id']}/participants", json={"member_id": member["id"]})
    must_ok(r, 201)
    participant = r.json()
    assert participant["service_track"] == "medical_missions", participant
    print("✓ application recommended medical_missions")

    r = requests.get(f"{BASE}/mission-trips/{trip['id']}/stats", params={"today": today.isoformat()})
    must_ok(r)
    stats = r.json()
    assert stats["days_until_trip"] == 60, stats
    assert stats["pending_applications"] == 1, stats
    print("✓ trip stats OK")

    r = requests.get(f"{BASE}/scripture/today")
    must_ok(r)
    print(f"✓ scripture of the day: {r.json()['reference']}")

    print("ALL GOOD ✅")


if __name__ == "__main__":
    main()
