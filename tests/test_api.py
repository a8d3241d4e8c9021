from datetime import datetime, timedelta

import pytest

from moodgarden.services import progress_tracker
from moodgarden.stores.progress_store import ProgressStore
from moodgarden.utils.errors import StorageError


class Clock:
    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock(monkeypatch):
    clock = Clock(datetime(2024, 4, 1, 10, 0))
    monkeypatch.setattr(progress_tracker, "utc_now", clock)
    return clock


# ---------------------- mood entries ----------------------

def test_create_mood_entry(client, ai, clock):
    resp = client.post("/api/mood-entries", json={"mood": "good", "journal": "Long walk today"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["mood"] == "good"
    assert body["journal"] == "Long walk today"
    assert body["aiPrompt"] == ai.reply
    assert body["promptCompleted"] is False
    assert body["userId"] == "default_user"
    assert body["newMilestones"] == []
    assert "Long walk today" in ai.prompts[0]


@pytest.mark.parametrize("payload", [{}, {"mood": "ecstatic"}, {"mood": None}, {"journal": "hi"}])
def test_create_mood_entry_rejects_bad_mood(client, payload):
    resp = client.post("/api/mood-entries", json=payload)
    assert resp.status_code == 400
    assert client.get("/api/mood-entries").json() == []


def test_ai_outage_does_not_block_check_in(client, ai, clock):
    ai.fail = True
    resp = client.post("/api/mood-entries", json={"mood": "anxious"})

    assert resp.status_code == 200
    assert resp.json()["aiPrompt"].startswith("When anxiety feels overwhelming")
    assert client.get("/api/user-progress").json()["streakCount"] == 1


def test_list_mood_entries_newest_first_with_limit(client, clock):
    for mood in ["sad", "neutral", "happy"]:
        client.post("/api/mood-entries", json={"mood": mood})
        clock.now += timedelta(hours=1)

    entries = client.get("/api/mood-entries").json()
    assert [e["mood"] for e in entries] == ["happy", "neutral", "sad"]

    limited = client.get("/api/mood-entries", params={"limit": 2}).json()
    assert [e["mood"] for e in limited] == ["happy", "neutral"]


def test_list_mood_entries_accepts_large_limit(client, clock):
    for mood in ["sad", "neutral", "happy"]:
        client.post("/api/mood-entries", json={"mood": mood})
        clock.now += timedelta(hours=1)

    resp = client.get("/api/mood-entries", params={"limit": 150})
    assert resp.status_code == 200
    assert len(resp.json()) == 3


@pytest.mark.parametrize("limit", [0, -5])
def test_list_mood_entries_rejects_non_positive_limit(client, limit):
    assert client.get("/api/mood-entries", params={"limit": limit}).status_code == 400


def test_streak_and_milestone_through_api(client, clock):
    for day in range(3):
        resp = client.post("/api/mood-entries", json={"mood": "good"})
        clock.now += timedelta(days=1)

    assert resp.json()["newMilestones"] == ["streak_3"]
    progress = client.get("/api/user-progress").json()
    assert progress["streakCount"] == 3
    assert progress["longestStreak"] == 3
    assert progress["milestones"] == ["streak_3"]
    assert progress["gardenItems"] == {"seedlings": 3, "flowers": 0, "trees": 0}


def test_same_day_check_in_keeps_streak(client, clock):
    client.post("/api/mood-entries", json={"mood": "good"})
    clock.now += timedelta(hours=5)
    client.post("/api/mood-entries", json={"mood": "happy"})

    progress = client.get("/api/user-progress").json()
    assert progress["streakCount"] == 1
    assert progress["gardenItems"] == {"seedlings": 1, "flowers": 1, "trees": 0}


def test_storage_failure_returns_500_and_commits_nothing(client, clock, monkeypatch):
    def broken_save(self, progress):
        raise StorageError("disk full")

    monkeypatch.setattr(ProgressStore, "save", broken_save)

    resp = client.post("/api/mood-entries", json={"mood": "happy"})
    assert resp.status_code == 500

    monkeypatch.undo()
    assert client.get("/api/mood-entries").json() == []


# ---------------------- quests ----------------------

def test_complete_prompt_rewards_once(client, clock):
    entry = client.post("/api/mood-entries", json={"mood": "sad"}).json()

    first = client.patch(f"/api/mood-entries/{entry['id']}/complete-prompt")
    second = client.patch(f"/api/mood-entries/{entry['id']}/complete-prompt")

    assert first.status_code == 200
    assert first.json()["promptCompleted"] is True
    assert second.status_code == 200
    assert second.json()["promptCompleted"] is True

    progress = client.get("/api/user-progress").json()
    assert progress["questsCompleted"] == 1
    assert progress["gardenItems"]["trees"] == 1


def test_complete_prompt_unknown_entry(client):
    resp = client.patch("/api/mood-entries/4242/complete-prompt")
    assert resp.status_code == 200
    assert resp.json() is None


# ---------------------- kindness exchange ----------------------

def test_post_kindness_message(client):
    resp = client.post("/api/kindness-messages", json={"message": "You've got this 💪"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "You've got this 💪"
    assert body["isAiGenerated"] is False
    assert body["used"] is False


@pytest.mark.parametrize("payload", [{}, {"message": ""}, {"message": "   "}, {"message": "a" * 201}])
def test_post_kindness_message_validation(client, payload):
    assert client.post("/api/kindness-messages", json=payload).status_code == 400


def test_random_message_served_once_then_generated(client, ai):
    ai.reply = "Small steps still move you forward. 🌱"
    posted = client.post("/api/kindness-messages", json={"message": "Be kind to yourself."}).json()

    first = client.get("/api/kindness-messages/random").json()
    assert first["id"] == posted["id"]
    assert first["used"] is True

    second = client.get("/api/kindness-messages/random").json()
    assert second["id"] != posted["id"]
    assert second["message"] == "Small steps still move you forward. 🌱"
    assert second["isAiGenerated"] is True


# ---------------------- progress & dashboard ----------------------

def test_user_progress_defaults(client):
    progress = client.get("/api/user-progress").json()
    assert progress["userId"] == "default_user"
    assert progress["streakCount"] == 0
    assert progress["lastCheckIn"] is None
    assert progress["gardenItems"] == {"seedlings": 0, "flowers": 0, "trees": 0}
    assert progress["achievements"] == []
    assert progress["milestones"] == []
    assert progress["questsCompleted"] == 0
    assert progress["longestStreak"] == 0


def test_dashboard_stats(client, clock):
    client.post("/api/mood-entries", json={"mood": "happy"})
    clock.now += timedelta(days=1)
    client.post("/api/mood-entries", json={"mood": "sad"})

    stats = client.get("/api/dashboard-stats").json()
    assert stats["checkInsThisMonth"] == 2
    assert stats["averageMood"] == 3.5
    assert stats["currentStreak"] == 2
    assert [p["mood"] for p in stats["moodTrends"]] == ["happy", "sad"]
    assert [p["value"] for p in stats["moodTrends"]] == [5, 2]
    assert stats["gardenItems"] == {"seedlings": 0, "flowers": 1, "trees": 0}


def test_dashboard_stats_empty(client):
    stats = client.get("/api/dashboard-stats").json()
    assert stats["averageMood"] == 0
    assert stats["moodTrends"] == []


def test_users_are_isolated_by_header(client, clock):
    client.post("/api/mood-entries", json={"mood": "happy"}, headers={"X-User-Id": "alice"})

    assert client.get("/api/user-progress", headers={"X-User-Id": "alice"}).json()["streakCount"] == 1
    assert client.get("/api/user-progress").json()["streakCount"] == 0
    assert client.get("/api/mood-entries").json() == []


# ---------------------- privacy controls ----------------------

def test_export_and_clear(client, clock):
    client.post("/api/mood-entries", json={"mood": "neutral", "journal": "quiet day"})

    export = client.get("/api/user-data/export").json()
    assert export["userProgress"]["streakCount"] == 1
    assert export["moodEntries"][0]["journal"] == "quiet day"

    cleared = client.delete("/api/user-data").json()
    assert cleared == {"userId": "default_user", "moodEntriesDeleted": 1, "progressReset": True}

    assert client.get("/api/mood-entries").json() == []
    assert client.get("/api/user-progress").json()["streakCount"] == 0


def test_import_restores_exported_backup(client, clock):
    client.post("/api/mood-entries", json={"mood": "happy", "journal": "sunny"})
    clock.now += timedelta(days=1)
    client.post("/api/mood-entries", json={"mood": "good"})
    backup = client.get("/api/user-data/export").json()

    client.delete("/api/user-data")
    resp = client.post("/api/user-data/import", json=backup)

    assert resp.status_code == 200
    assert resp.json() == {"userId": "default_user", "moodEntriesImported": 2, "progressRestored": True}
    entries = client.get("/api/mood-entries").json()
    assert [e["mood"] for e in entries] == ["good", "happy"]
    assert entries[1]["journal"] == "sunny"
    progress = client.get("/api/user-progress").json()
    assert progress["streakCount"] == 2
    assert progress["gardenItems"] == backup["userProgress"]["gardenItems"]


@pytest.mark.parametrize("payload", [
    "not a backup",
    {"moodEntries": [{"mood": "ecstatic", "timestamp": "2024-04-01T10:00:00"}]},
    {"userProgress": {"streakCount": -1}},
])
def test_import_rejects_bad_payload(client, clock, payload):
    client.post("/api/mood-entries", json={"mood": "neutral"})

    resp = client.post("/api/user-data/import", json=payload)

    assert resp.status_code == 400
    assert resp.json()["message"].startswith("Invalid backup")
    assert len(client.get("/api/mood-entries").json()) == 1


def test_import_without_body_is_rejected(client):
    assert client.post("/api/user-data/import").status_code == 400


def test_healthz(client):
    body = client.get("/healthz").json()
    assert body["details"]["db_connection"] is True
    assert body["status"] in ("ok", "partial")
