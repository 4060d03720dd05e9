def get_client():
    from app.main import app  # noqa: WPS433
    from fastapi.testclient import TestClient  # noqa: WPS433
    return TestClient(app)


def register(client, username="maria", password="s3cret"):
    r = client.post("/users/register", json={"username": username, "password": password})
    assert r.status_code == 200, r.text
    return r.json()


def add_entry(client, user_id, day, weight, notes=None):
    r = client.post(f"/users/{user_id}/entries", json={"date": day, "weight": weight, "notes": notes})
    assert r.status_code == 200, r.text
    return r.json()


def test_root_and_health_ok():
    client = get_client()
    r = client.get("/")
    assert r.status_code == 200
    assert "message" in r.json()
    h = client.get("/health")
    assert h.status_code == 200
    assert h.json()["status"] == "ok"


def test_register_and_login():
    client = get_client()
    user = register(client, username="  Maria ")
    assert user["username"] == "Maria"
    assert "password" not in user and "hashed_password" not in user

    ok = client.post("/users/login", json={"username": "maria", "password": "s3cret"})
    assert ok.status_code == 200
    assert ok.json()["id"] == user["id"]

    bad = client.post("/users/login", json={"username": "maria", "password": "nope"})
    assert bad.status_code == 401
    unknown = client.post("/users/login", json={"username": "joao", "password": "s3cret"})
    assert unknown.status_code == 401


def test_register_rejects_duplicates_and_short_values():
    client = get_client()
    register(client)
    dup = client.post("/users/register", json={"username": "MARIA", "password": "s3cret"})
    assert dup.status_code == 400
    short_name = client.post("/users/register", json={"username": " a ", "password": "s3cret"})
    assert short_name.status_code == 422
    short_pw = client.post("/users/register", json={"username": "ana", "password": "123"})
    assert short_pw.status_code == 422


def test_create_list_update_delete_entry():
    client = get_client()
    user = register(client)
    uid = user["id"]

    first = add_entry(client, uid, "2024-01-01", 80.0, notes="after holidays")
    add_entry(client, uid, "2024-01-02", 79.5)

    lr = client.get(f"/users/{uid}/entries")
    assert lr.status_code == 200
    arr = lr.json()
    assert [e["date"] for e in arr] == ["2024-01-02", "2024-01-01"]

    ranged = client.get(f"/users/{uid}/entries", params={"start_date": "2024-01-02", "end_date": "2024-01-31"})
    assert [e["weight"] for e in ranged.json()] == [79.5]

    ur = client.put(f"/users/{uid}/entries/{first['id']}", json={"weight": 80.2, "date": "2023-12-31"})
    assert ur.status_code == 200, ur.text
    updated = ur.json()
    assert updated["id"] == first["id"]
    assert updated["weight"] == 80.2
    assert updated["date"] == "2023-12-31"
    assert updated["notes"] == "after holidays"

    dr = client.delete(f"/users/{uid}/entries/{first['id']}")
    assert dr.status_code == 200
    assert dr.json() == {"success": True}
    assert len(client.get(f"/users/{uid}/entries").json()) == 1
    assert client.delete(f"/users/{uid}/entries/{first['id']}").status_code == 404


def test_entry_validation():
    client = get_client()
    uid = register(client)["id"]
    r = client.post(f"/users/{uid}/entries", json={"date": "2024-01-01", "weight": 0})
    assert r.status_code == 422
    r = client.post(f"/users/{uid}/entries", json={"date": "not-a-date", "weight": 80})
    assert r.status_code == 422

    entry = add_entry(client, uid, "2024-01-01", 80.0)
    r = client.put(f"/users/{uid}/entries/{entry['id']}", json={"date": "01/02/2024"})
    assert r.status_code == 422
    r = client.put(f"/users/{uid}/entries/{entry['id']}", json={"weight": -1})
    assert r.status_code == 422
    assert client.put(f"/users/{uid}/entries/9999", json={"weight": 70}).status_code == 404


def test_unknown_user_is_404():
    client = get_client()
    assert client.get("/users/42/entries").status_code == 404
    assert client.get("/users/42/goal").status_code == 404
    assert client.get("/users/42/progress/daily").status_code == 404


def test_goal_upsert_derives_initial_weight_and_pace():
    client = get_client()
    uid = register(client)["id"]
    assert client.get(f"/users/{uid}/goal").json() is None

    add_entry(client, uid, "2024-01-01", 81.0)
    add_entry(client, uid, "2024-01-02", 80.0)

    r = client.put(
        f"/users/{uid}/goal",
        params={"today": "2024-01-02"},
        json={"target_weight": 70.0, "target_date": "2024-02-01"},
    )
    assert r.status_code == 200, r.text
    goal = r.json()
    assert goal["initial_weight"] == 80.0
    assert abs(goal["daily_goal"] - 333.333) < 0.01
    assert abs(goal["weekly_goal"] - 10 / (30 / 7)) < 1e-6
    assert abs(goal["monthly_goal"] - 10.0) < 1e-6

    # Saving again replaces the goal in place and keeps explicit values
    r = client.put(
        f"/users/{uid}/goal",
        params={"today": "2024-01-02"},
        json={"target_weight": 75.0, "weekly_goal": 0.5},
    )
    again = r.json()
    assert again["id"] == goal["id"]
    assert again["target_date"] is None
    assert again["weekly_goal"] == 0.5
    assert again["daily_goal"] is None


def test_goal_validation_and_delete():
    client = get_client()
    uid = register(client)["id"]
    r = client.put(f"/users/{uid}/goal", json={"target_weight": -5})
    assert r.status_code == 422

    assert client.delete(f"/users/{uid}/goal").status_code == 404
    client.put(f"/users/{uid}/goal", json={"target_weight": 65.0})
    dr = client.delete(f"/users/{uid}/goal")
    assert dr.status_code == 200
    assert client.get(f"/users/{uid}/goal").json() is None


def test_daily_progress():
    client = get_client()
    uid = register(client)["id"]
    add_entry(client, uid, "2024-01-01", 80.0)
    add_entry(client, uid, "2024-01-02", 79.5)
    client.put(
        f"/users/{uid}/goal",
        params={"today": "2024-01-02"},
        json={"target_weight": 70.0, "target_date": "2024-02-01"},
    )

    r = client.get(f"/users/{uid}/progress/daily", params={"today": "2024-01-02"})
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["today"] == "2024-01-02"
    assert data["current_weight"] == 79.5
    assert abs(data["delta"] + 0.5) < 1e-9
    assert data["insight"] == "strong-loss"
    assert data["is_gain"] is False
    assert data["projection"]["days_remaining"] == 30
    assert len(data["timeline"]) == 2
    assert len(data["chart"]) == 2
    # Saved pace wins over the live projection
    assert abs(data["pace"]["daily_grams"] - 9.5 / 30 * 1000) < 1e-6


def test_daily_progress_without_entry_today():
    client = get_client()
    uid = register(client)["id"]
    add_entry(client, uid, "2024-01-01", 80.0)
    data = client.get(f"/users/{uid}/progress/daily", params={"today": "2024-01-05"}).json()
    assert data["insight"] == "no-entry-today"
    assert data["delta"] is None
    assert data["projection"] is None


def test_weekly_and_monthly_progress():
    client = get_client()
    uid = register(client)["id"]
    add_entry(client, uid, "2023-12-30", 80.5)
    add_entry(client, uid, "2024-01-01", 80.0)
    add_entry(client, uid, "2024-01-03", 79.0)
    client.put(
        f"/users/{uid}/goal",
        json={"target_weight": 70.0, "weekly_goal": 2.0, "monthly_goal": 4.0},
    )

    wk = client.get(f"/users/{uid}/progress/weekly", params={"today": "2024-01-03"}).json()
    assert wk["week_start"] == "2024-01-01"
    assert wk["week_end"] == "2024-01-07"
    assert abs(wk["week_delta"] + 1.0) < 1e-9
    assert abs(wk["vs_last_week"] + 1.5) < 1e-9
    assert abs(wk["progress_percent"] - 50.0) < 1e-9
    assert len(wk["chart"]["points"]) == 2

    mo = client.get(f"/users/{uid}/progress/monthly", params={"today": "2024-01-03"}).json()
    assert mo["month_start"] == "2024-01-01"
    assert mo["month_end"] == "2024-01-31"
    assert abs(mo["vs_last_month"] + 1.5) < 1e-9
    assert abs(mo["progress_percent"] - 25.0) < 1e-9
    assert [p["month_start"] for p in mo["series"]] == ["2023-12-01", "2024-01-01"]


def test_goal_progress():
    client = get_client()
    uid = register(client)["id"]
    assert client.get(f"/users/{uid}/progress/goal").status_code == 404

    add_entry(client, uid, "2024-01-02", 80.0)
    client.put(
        f"/users/{uid}/goal",
        params={"today": "2024-01-02"},
        json={"target_weight": 70.0, "target_date": "2024-02-01", "initial_weight": 90.0},
    )
    data = client.get(f"/users/{uid}/progress/goal", params={"today": "2024-01-02"}).json()
    assert data["initial_weight"] == 90.0
    assert abs(data["completion_percent"] - 50.0) < 1e-9
    assert abs(data["remaining_kg"] - 10.0) < 1e-9
    assert abs(data["stored_pace"]["monthly_kg"] - 10.0) < 1e-6


def test_entries_of_another_user_are_not_reachable():
    client = get_client()
    owner = register(client, username="maria")["id"]
    other = register(client, username="joao")["id"]
    entry = add_entry(client, owner, "2024-01-01", 80.0)

    assert client.put(f"/users/{other}/entries/{entry['id']}", json={"weight": 60.0}).status_code == 404
    assert client.delete(f"/users/{other}/entries/{entry['id']}").status_code == 404

    kept = client.get(f"/users/{owner}/entries").json()
    assert [(e["id"], e["weight"]) for e in kept] == [(entry["id"], 80.0)]


def test_goal_rejects_bad_initial_weight_and_pace():
    client = get_client()
    uid = register(client)["id"]
    add_entry(client, uid, "2024-01-02", 80.0)

    for body in (
        {"target_weight": 70.0, "initial_weight": -1},
        {"target_weight": 70.0, "initial_weight": 0},
        {"target_weight": 70.0, "weekly_goal": -0.5},
    ):
        r = client.put(f"/users/{uid}/goal", json=body)
        assert r.status_code == 422, body

    # NaN is not valid JSON for most encoders, so send the raw text
    r = client.put(
        f"/users/{uid}/goal",
        content='{"target_weight": 70.0, "daily_goal": NaN}',
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 422
    r = client.put(
        f"/users/{uid}/goal",
        content='{"target_weight": 70.0, "initial_weight": NaN}',
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 422

    assert client.get(f"/users/{uid}/goal").json() is None
    r = client.get(f"/users/{uid}/progress/goal", params={"today": "2024-01-02"})
    assert r.status_code == 404
