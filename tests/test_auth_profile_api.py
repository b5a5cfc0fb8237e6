# -*- coding: utf-8 -*-

from __future__ import annotations

import shutil
import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

from slimtrack.api import create_app
from slimtrack.config import Settings


class TestAuthAndProfile(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls._tmp = Path(tempfile.mkdtemp(prefix="slimtrack-test-"))
        app_settings = Settings()
        app_settings.data_root = cls._tmp
        app_settings.app_db_path = cls._tmp / "slimtrack.db"
        app_settings.jwt_secret = "test-secret"
        app_settings.llm_api_key = None
        cls.app = create_app(app_settings)
        cls.client = TestClient(cls.app)
        cls.client.__enter__()

    @classmethod
    def tearDownClass(cls) -> None:
        cls.client.__exit__(None, None, None)
        shutil.rmtree(cls._tmp, ignore_errors=True)

    def _register(self, email: str) -> dict:
        resp = self.client.post("/api/auth/register", json={"email": email, "password": "password123"})
        self.assertEqual(resp.status_code, 200, resp.text)
        return {"Authorization": f"Bearer {resp.json()['token']}"}

    def test_health_and_public_routes(self) -> None:
        unauth = TestClient(self.app)
        self.assertEqual(unauth.get("/api/health").status_code, 200)
        resp = unauth.get("/api/foods/search", params={"query": "米饭"})
        self.assertEqual(resp.status_code, 200)
        names = [f["name"] for f in resp.json()["foods"]]
        self.assertIn("米饭", names)
        self.assertIn("白米饭", names)
        food_id = resp.json()["foods"][0]["id"]
        self.assertEqual(unauth.get(f"/api/foods/{food_id}").status_code, 200)
        self.assertEqual(unauth.get("/api/foods/999999").status_code, 404)
        unauth.close()

    def test_auth_required(self) -> None:
        unauth = TestClient(self.app)
        for path in ("/api/profile", "/api/diet/logs", "/api/weight", "/api/exercise", "/api/sleep",
                     "/api/checkins/stats", "/api/checkins/achievements", "/api/tools/exercise-types"):
            with self.subTest(path=path):
                self.assertEqual(unauth.get(path).status_code, 401)
        resp = unauth.get("/api/profile", headers={"Authorization": "Bearer not-a-token"})
        self.assertEqual(resp.status_code, 401)
        unauth.close()

    def test_register_login_me(self) -> None:
        headers = self._register("Login@Example.com")
        resp = self.client.get("/api/auth/me", headers=headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["email"], "login@example.com")

        dup = self.client.post("/api/auth/register", json={"email": "login@example.com", "password": "password123"})
        self.assertEqual(dup.status_code, 400)

        bad = self.client.post("/api/auth/login", json={"email": "login@example.com", "password": "wrong-password"})
        self.assertEqual(bad.status_code, 401)
        ok = self.client.post("/api/auth/login", json={"email": "login@example.com", "password": "password123"})
        self.assertEqual(ok.status_code, 200)
        self.assertTrue(ok.json()["token"])
        padded = self.client.post("/api/auth/login", json={"email": "  LOGIN@example.com ", "password": "password123"})
        self.assertEqual(padded.status_code, 200)

    def test_register_rejects_malformed_email(self) -> None:
        for email in ("no-at-sign", "@example.com", "name@", "a b@example.com"):
            with self.subTest(email=email):
                resp = self.client.post("/api/auth/register", json={"email": email, "password": "password123"})
                self.assertEqual(resp.status_code, 422)

    def test_cookie_session_and_logout(self) -> None:
        browser = TestClient(self.app)
        resp = browser.post("/api/auth/register", json={"email": "cookie@example.com", "password": "password123"})
        self.assertEqual(resp.status_code, 200)
        self.assertIn("slimtrack_token", resp.cookies)
        self.assertEqual(browser.get("/api/auth/me").json()["email"], "cookie@example.com")
        self.assertEqual(browser.get("/api/weight").status_code, 200)

        self.assertEqual(browser.post("/api/auth/logout").json(), {"success": True})
        self.assertEqual(browser.get("/api/weight").status_code, 401)
        browser.close()

    def test_profile_create_and_read(self) -> None:
        headers = self._register("profile@example.com")
        self.assertIsNone(self.client.get("/api/profile", headers=headers).json())

        resp = self.client.post(
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
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json(), {"success": True, "bmr": 1749, "tdee": 2711, "daily_calorie_target": 2211})

        profile = self.client.get("/api/profile", headers=headers).json()
        self.assertEqual(profile["bmi"], 26.1)
        self.assertEqual(profile["bmi_category"], "overweight")
        self.assertEqual(profile["daily_adjustment"], -500)
        self.assertEqual(profile["days_to_goal"], 154)

    def test_days_to_goal_stops_once_target_is_passed(self) -> None:
        headers = self._register("overshoot@example.com")
        body = {
            "gender": "male",
            "age": 30,
            "height_cm": 175,
            "initial_weight_kg": 80,
            "target_weight_kg": 70,
            "activity_level": "moderate",
        }
        self.assertEqual(self.client.post("/api/profile", headers=headers, json=body).status_code, 200)

        self.client.post("/api/weight", headers=headers, json={"weight_kg": 75, "logged_at": "2024-05-01T08:00:00Z"})
        self.assertEqual(self.client.get("/api/profile", headers=headers).json()["days_to_goal"], 77)

        self.client.post("/api/weight", headers=headers, json={"weight_kg": 65, "logged_at": "2024-06-01T08:00:00Z"})
        profile = self.client.get("/api/profile", headers=headers).json()
        self.assertEqual(profile["daily_adjustment"], -500)
        self.assertIsNone(profile["days_to_goal"])

    def test_profile_upsert_female_light(self) -> None:
        headers = self._register("female@example.com")
        body = {
            "gender": "female",
            "age": 25,
            "height_cm": 165,
            "initial_weight_kg": 60,
            "target_weight_kg": 60,
            "activity_level": "light",
        }
        first = self.client.post("/api/profile", headers=headers, json=body).json()
        self.assertEqual((first["bmr"], first["tdee"], first["daily_calorie_target"]), (1345, 1849, 1849))

        body["activity_level"] = "sedentary"
        second = self.client.post("/api/profile", headers=headers, json=body).json()
        self.assertEqual(second["tdee"], 1614)
        profile = self.client.get("/api/profile", headers=headers).json()
        self.assertEqual(profile["activity_level"], "sedentary")
        self.assertIsNone(profile["days_to_goal"])

    def test_profile_validation(self) -> None:
        headers = self._register("invalid@example.com")
        resp = self.client.post(
            "/api/profile",
            headers=headers,
            json={
                "gender": "other",
                "age": 30,
                "height_cm": 175,
                "initial_weight_kg": 80,
                "target_weight_kg": 70,
                "activity_level": "moderate",
            },
        )
        self.assertEqual(resp.status_code, 422)

    def test_tools_endpoints(self) -> None:
        headers = self._register("tools@example.com")
        post = lambda path, body: self.client.post(f"/api/tools/{path}", headers=headers, json=body)  # noqa: E731

        self.assertEqual(post("bmr", {"gender": "male", "age": 30, "height_cm": 175, "weight_kg": 80}).json(), {"kcal": 1749})
        self.assertEqual(post("tdee", {"bmr": 1749, "activity_level": "moderate"}).json(), {"kcal": 2711})
        self.assertEqual(
            post("daily-target", {"tdee": 1000, "current_weight_kg": 80, "target_weight_kg": 70}).json(),
            {"kcal": 1200},
        )
        bmi = post("bmi", {"weight_kg": 70, "height_cm": 175}).json()
        self.assertEqual(bmi["bmi"], 22.9)
        self.assertEqual(bmi["category"], "normal")
        self.assertEqual(bmi["label"], "正常")
        self.assertEqual(
            post("exercise-calories", {"exercise_type": "跑步", "duration_min": 30, "weight_kg": 80}).json(),
            {"kcal": 320},
        )
        self.assertEqual(
            post("days-to-goal", {"current_weight_kg": 80, "target_weight_kg": 70, "daily_calorie_deficit": -500}).json(),
            {"days": 154},
        )
        zero = post("days-to-goal", {"current_weight_kg": 80, "target_weight_kg": 70, "daily_calorie_deficit": 0})
        self.assertEqual(zero.status_code, 400)
        self.assertEqual(post("weight-change", {"net_calories": -3850}).json(), {"weight_change_kg": -0.5})

        types = self.client.get("/api/tools/exercise-types", headers=headers).json()
        running = next(t for t in types if t["label"] == "跑步")
        self.assertEqual(running["met"], 8.0)
        self.assertIn("running", running["aliases"])


if __name__ == "__main__":
    unittest.main()
