"""
/checklist endpoint tests
"""
from datetime import date, timedelta


def _today():
    return date.today().isoformat()


def test_list_empty(client):
    r = client.get("/checklist")
    assert r.status_code == 200
    assert r.json() == []


def test_upsert_creates_entry_for_today(client):
    r = client.post("/checklist", json={"item": "breakfast", "checked": True})
    assert r.status_code == 201
    body = r.json()
    assert body["item"] == "breakfast"
    assert body["checked"] is True
    assert body["date"] == _today()
    assert body["id"] > 0

    assert client.get("/checklist").json() == [body]


def test_upsert_is_idempotent_last_write_wins(client):
    first = client.post("/checklist", json={"item": "lunch", "checked": True}).json()
    second = client.post("/checklist", json={"item": "lunch", "checked": False}).json()
    assert second["id"] == first["id"]

    rows = [c for c in client.get("/checklist").json() if c["item"] == "lunch"]
    assert len(rows) == 1
    assert rows[0]["checked"] is False


def test_client_date_is_overwritten(client):
    r = client.post("/checklist", json={"item": "dinner", "checked": True, "date": "2020-01-01"})
    assert r.status_code == 201
    assert r.json()["date"] == _today()


def test_list_only_today(client, db):
    yesterday = (date.today() - timedelta(days=1)).isoformat()
    db.execute(
        "INSERT INTO meal_checklist (date, item, checked) VALUES (?, ?, ?)",
        (yesterday, "snack", 1),
    )
    db.commit()
    client.post("/checklist", json={"item": "snack", "checked": False})

    rows = client.get("/checklist").json()
    assert [(c["item"], c["date"], c["checked"]) for c in rows] == [("snack", _today(), False)]

    # The old row is untouched
    old = db.execute("SELECT checked FROM meal_checklist WHERE date = ?", (yesterday,)).fetchone()
    assert old["checked"] == 1


def test_post_rejects_non_boolean_checked(client):
    r = client.post("/checklist", json={"item": "breakfast", "checked": "yes"})
    assert r.status_code == 400
    assert r.headers["content-type"].startswith("text/plain")


def test_post_rejects_missing_item(client):
    r = client.post("/checklist", json={"checked": True})
    assert r.status_code == 400


def test_delete_scoped_to_today(client, db):
    yesterday = (date.today() - timedelta(days=1)).isoformat()
    db.execute(
        "INSERT INTO meal_checklist (date, item, checked) VALUES (?, ?, ?)",
        (yesterday, "breakfast", 1),
    )
    db.commit()
    client.post("/checklist", json={"item": "breakfast", "checked": True})

    r = client.delete("/checklist?item=breakfast")
    assert r.status_code == 200
    assert r.json() == {"message": "deleted"}
    assert client.get("/checklist").json() == []

    remaining = db.execute("SELECT date FROM meal_checklist").fetchall()
    assert [row["date"] for row in remaining] == [yesterday]


def test_delete_requires_item(client):
    r = client.delete("/checklist")
    assert r.status_code == 400
    assert r.text == "item is required"


def test_delete_missing_item_is_ok(client):
    r = client.delete("/checklist?item=nothing")
    assert r.status_code == 200


def test_options_empty_body(client):
    r = client.options("/checklist")
    assert r.status_code == 200
    assert r.content == b""


def test_unsupported_verb(client):
    r = client.patch("/checklist", json={"item": "x", "checked": True})
    assert r.status_code == 405
