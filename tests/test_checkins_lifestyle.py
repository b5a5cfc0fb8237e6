# -*- coding: utf-8 -*-

from __future__ import annotations

import shutil
import tempfile
import unittest
from datetime import date
from pathlib import Path

from fastapi.testclient import TestClient

from slimtrack.api import create_app
from slimtrack.checkins.storage import consecutive_days, derive_achievements
from slimtrack.config import Settings
from slimtrack.lifestyle.models import LifestyleDay
from slimtrack.lifestyle.storage import projected_weight_change


class TestStreakArithmetic(unittest.TestCase):
    def test_streak_ending_today(self) -> None:
        days = ["2024-05-03", "2024-05-02", "2024-05-01", "2024-04-28"]
        self.assertEqual(consecutive_days(days, date(2024, 5, 3)), 3)

    def test_streak_ending_yesterday_still_counts(self) -> None:
        days = ["2024-05-02", "2024-05-01"]
        self.assertEqual(consecutive_days(days, date(2024, 5, 3)), 2)

    def test_broken_streak(self) -> None:
        self.assertEqual(consecutive_days(["2024-05-01"], date(2024, 5, 3)), 0)
        self.assertEqual(consecutive_days([], date(2024, 5, 3)), 0)

    def test_duplicates_and_garbage_ignored(self) -> None:
        days = ["2024-05-03", "2024-05-03", "not-a-date", "2024-05-02T10:00:00Z"]
        self.assertEqual(consecutive_days(days, date(2024, 5, 3)), 2)


class TestAchievementRules(unittest.TestCase):
    def test_thresholds_and_progress(self) -> None:
        items = {a.key: a for a in derive_achievements(streak=7, weight_lost_kg=2.5, exercise_count=100)}
        self.assertTrue(items["streak_7"].unlocked)
        self.assertFalse(items["streak_30"].unlocked)
        self.assertAlmostEqual(items["streak_30"].progress, 0.233)
        self.assertFalse(items["weight_loss_5kg"].unlocked)
        self.assertEqual(items["weight_loss_5kg"].progress, 0.5)
        self.assertTrue(items["exercise_100"].unlocked)
        self.assertEqual(items["exercise_100"].progress, 1.0)

    def test_weight_gain_counts_as_no_loss(self) -> None:
        items = {a.key: a for a in derive_achievements(streak=0, weight_lost_kg=-3.0, exercise_count=0)}
        self.assertEqual(items["weight_loss_5kg"].current, 0.0)
        self.assertEqual(items["weight_loss_5kg"].progress, 0.0)
        self.assertEqual(sum(a.unlocked for a in items.values()), 0)


class TestProjection(unittest.TestCase):
    def test_only_days_with_intake_count(self) -> None:
        days = [
            LifestyleDay(date="2024-05-01", intake_kcal=1500, exercise_kcal=300),
            LifestyleDay(date="2024-05-02", intake_kcal=0, exercise_kcal=500),
            LifestyleDay(date="2024-05-03", intake_kcal=2000, exercise_kcal=0),
        ]
        # (1500 - 2000 - 300) + (2000 - 2000 - 0) = -800
        self.assertAlmostEqual(projected_weight_change(days, 2000), round(-800 / 7700, 3))
        self.assertIsNone(projected_weight_change(days, None))


class TestCheckInsAndLifestyleApi(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls._tmp = Path(tempfile.mkdtemp(prefix="slimtrack-test-"))
        app_settings = Settings()
        app_settings.data_root = cls._tmp
        app_settings.app_db_path = cls._tmp / "slimtrack.db"
        app_settings.jwt_secret = "test-secret"
        app_settings.llm_api_key = None
        cls.client = TestClient(create_app(app_settings))
        cls.client.__enter__()

    @classmethod
    def tearDownClass(cls) -> None:
        cls.client.__exit__(None, None, None)
        shutil.rmtree(cls._tmp, ignore_errors=True)

    def _register(self, email: str) -> dict:
        resp = self.client.post("/api/auth/register", json={"email": email, "password": "password123"})
        self.assertEqual(resp.status_code, 200, resp.text)
        return {"Authorization": f"Bearer {resp.json()['token']}"}

    def test_checkins_idempotent_and_stats(self) -> None:
        headers = self._register("checkin@example.com")
        first = self.client.post("/api/checkins", headers=headers, json={"type": "diet", "date": "2024-05-03"})
        self.assertEqual(first.status_code, 200, first.text)
        self.assertTrue(first.json()["created"])
        again = self.client.post("/api/checkins", headers=headers, json={"type": "diet", "date": "2024-05-03"})
        self.assertEqual(again.status_code, 200)
        self.assertFalse(again.json()["created"])

        for body in (
            {"type": "exercise", "date": "2024-05-03"},
            {"type": "diet", "date": "2024-05-02"},
            {"type": "sleep", "date": "2024-04-30"},
        ):
            self.assertEqual(self.client.post("/api/checkins", headers=headers, json=body).status_code, 200)

        stats = self.client.get("/api/checkins/stats", headers=headers, params={"today": "2024-05-03"}).json()
        self.assertEqual(stats["consecutive_days"], 2)
        self.assertEqual(stats["total_days"], 3)
        self.assertEqual(stats["by_type"], {"diet": 2, "exercise": 1, "sleep": 1})
        self.assertEqual(stats["last_check_in"], "2024-05-03")

        later = self.client.get("/api/checkins/stats", headers=headers, params={"today": "2024-05-10"}).json()
        self.assertEqual(later["consecutive_days"], 0)

        bad = self.client.post("/api/checkins", headers=headers, json={"type": "mood"})
        self.assertEqual(bad.status_code, 422)

    def test_achievements_from_logs(self) -> None:
        headers = self._register("achiever@example.com")
        empty = self.client.get("/api/checkins/achievements", headers=headers, params={"today": "2024-05-07"}).json()
        self.assertEqual(empty["unlocked_count"], 0)
        self.assertIsNone(empty["weight_lost_kg"])
        self.assertIsNone(empty["goal_progress"])

        self.client.post(
            "/api/profile",
            headers=headers,
            json={
                "gender": "male",
                "age": 30,
                "height_cm": 175,
                "initial_weight_kg": 80,
                "target_weight_kg": 70,
                "activity_level": "moderate",
            },
        )
        self.client.post("/api/weight", headers=headers, json={"weight_kg": 74.5, "logged_at": "2024-05-06T08:00:00Z"})
        for day in range(1, 8):
            self.client.post("/api/checkins", headers=headers, json={"type": "diet", "date": f"2024-05-0{day}"})
        for _ in range(3):
            self.client.post("/api/exercise", headers=headers, json={"exercise_type": "跑步", "duration_min": 30})

        data = self.client.get("/api/checkins/achievements", headers=headers, params={"today": "2024-05-07"}).json()
        self.assertEqual(data["weight_lost_kg"], 5.5)
        self.assertEqual(data["goal_loss_kg"], 10.0)
        self.assertEqual(data["goal_progress"], 0.55)
        items = {a["key"]: a for a in data["achievements"]}
        self.assertEqual({a["type"] for a in data["achievements"]}, {"consecutive_checkin", "weight_goal", "exercise_milestone"})
        self.assertTrue(items["streak_7"]["unlocked"])
        self.assertFalse(items["streak_30"]["unlocked"])
        self.assertEqual(items["streak_30"]["current"], 7)
        self.assertTrue(items["weight_loss_5kg"]["unlocked"])
        self.assertFalse(items["exercise_100"]["unlocked"])
        self.assertEqual(items["exercise_100"]["progress"], 0.03)
        self.assertEqual(data["unlocked_count"], 2)

    def test_lifestyle_summary(self) -> None:
        headers = self._register("lifestyle@example.com")
        self.client.post(
            "/api/profile",
            headers=headers,
            json={
                "gender": "male",
                "age": 30,
                "height_cm": 175,
                "initial_weight_kg": 80,
                "target_weight_kg": 70,
                "activity_level": "moderate",
            },
        )
        self.client.post(
            "/api/diet/logs",
            headers=headers,
            json={"food_name": "米饭", "grams": 150, "calories": 1500, "protein_g": 10, "fat_g": 2,
                  "carbs_g": 300, "logged_at": "2024-05-01T04:00:00Z"},
        )
        self.client.post(
            "/api/diet/logs",
            headers=headers,
            json={"food_name": "面条", "grams": 200, "calories": 711, "protein_g": 20.5,
                  "logged_at": "2024-05-01T11:00:00Z"},
        )
        self.client.post(
            "/api/exercise",
            headers=headers,
            json={"exercise_type": "跑步", "duration_min": 30, "logged_at": "2024-05-01T07:00:00Z"},
        )
        self.client.post(
            "/api/sleep",
            headers=headers,
            json={"bed_time": "2024-04-30T23:00:00Z", "wake_time": "2024-05-01T07:00:00Z"},
        )
        self.client.post("/api/weight", headers=headers, json={"weight_kg": 79.5, "logged_at": "2024-05-01T06:00:00Z"})
        self.client.post("/api/weight", headers=headers, json={"weight_kg": 79.2, "logged_at": "2024-05-01T22:00:00Z"})

        resp = self.client.get("/api/lifestyle/summary", headers=headers, params={"start": "2024-05-01", "end": "2024-05-02"})
        self.assertEqual(resp.status_code, 200, resp.text)
        data = resp.json()
        self.assertEqual([d["date"] for d in data["days"]], ["2024-05-01", "2024-05-02"])
        day = data["days"][0]
        self.assertEqual(day["intake_kcal"], 2211)
        self.assertEqual(day["food_entry_count"], 2)
        self.assertEqual(day["exercise_kcal"], 320)
        self.assertEqual(day["net_kcal"], 1891)
        self.assertEqual(day["sleep_hours"], 8)
        self.assertEqual(day["weight_kg"], 79.2)
        self.assertEqual(data["days"][1]["intake_kcal"], 0)
        self.assertIsNone(data["days"][1]["weight_kg"])

        self.assertEqual(data["totals"]["intake_kcal"], 2211)
        self.assertEqual(data["totals"]["net_kcal"], 1891)
        self.assertEqual(
            (data["totals"]["protein_g"], data["totals"]["fat_g"], data["totals"]["carbs_g"]), (30.5, 2.0, 300.0)
        )
        self.assertEqual(data["tdee"], 2711)
        # 2211 - 2711 - 320 = -820 on the only day with intake
        self.assertAlmostEqual(data["projected_weight_change_kg"], round(-820 / 7700, 3))
        self.assertEqual(data["warnings"], [])

    def test_lifestyle_invalid_range(self) -> None:
        headers = self._register("lifestyle-bad@example.com")
        data = self.client.get(
            "/api/lifestyle/summary", headers=headers, params={"start": "2024-05-03", "end": "2024-05-01"}
        ).json()
        self.assertEqual(data["days"], [])
        self.assertEqual(data["warnings"], ["Invalid date range"])
        self.assertIsNone(data["projected_weight_change_kg"])

    def test_lifestyle_range_is_capped(self) -> None:
        headers = self._register("lifestyle-long@example.com")
        data = self.client.get(
            "/api/lifestyle/summary", headers=headers, params={"start": "1000-01-01", "end": "2999-12-31"}
        ).json()
        self.assertEqual(data["days"], [])
        self.assertEqual(data["warnings"], ["Date range longer than 366 days"])

        year = self.client.get(
            "/api/lifestyle/summary", headers=headers, params={"start": "2024-01-01", "end": "2024-12-31"}
        ).json()
        self.assertEqual(len(year["days"]), 366)
        self.assertEqual(year["warnings"], [])


if __name__ == "__main__":
    unittest.main()
