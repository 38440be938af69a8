# -*- coding: utf-8 -*-

from __future__ import annotations

import random
import unittest

from fastapi.testclient import TestClient

from alagapp.tips.catalog import TIPS, random_tip
from alagapp.tips.models import TipCategory

from .helpers import cleanup, make_app, register


class _WellnessCase(unittest.TestCase):
    def setUp(self) -> None:
        self.app, self._tmp = make_app()
        self.client = TestClient(self.app)
        self.user = register(self.client)["user"]

    def tearDown(self) -> None:
        self.client.close()
        cleanup(self._tmp)


class TestCheckIns(_WellnessCase):
    def test_one_check_in_per_day(self) -> None:
        resp = self.client.post("/api/check-ins", json={"mood": 4, "energy": 2, "symptoms": ["headache"], "notes": "ok"})
        self.assertEqual(resp.status_code, 201, resp.text)
        created = resp.json()["data"]
        self.assertEqual(created["symptoms"], ["headache"])
        self.assertNotIn("updated", resp.json())

        resp = self.client.post("/api/check-ins", json={"mood": 5, "energy": 5})
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertTrue(body["updated"])
        self.assertEqual(body["data"]["id"], created["id"])
        self.assertEqual(body["data"]["mood"], 5)
        self.assertEqual(body["data"]["symptoms"], [])

        resp = self.client.get("/api/check-ins")
        self.assertEqual(len(resp.json()["data"]), 1)
        resp = self.client.get("/api/check-ins", params={"date": created["check_in_date"]})
        self.assertEqual(resp.json()["data"][0]["id"], created["id"])
        resp = self.client.get("/api/check-ins", params={"date": "1999-01-01"})
        self.assertEqual(resp.json()["data"], [])

    def test_mood_range(self) -> None:
        resp = self.client.post("/api/check-ins", json={"mood": 6, "energy": 3})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("error", resp.json())


class TestMedications(_WellnessCase):
    _BODY = {"name": "Metformin", "dosage": "500", "frequency": "twice_daily", "schedule_times": ["08:00", "20:00"]}

    def test_crud_and_doses(self) -> None:
        resp = self.client.post("/api/medications", json=self._BODY)
        self.assertEqual(resp.status_code, 201, resp.text)
        med = resp.json()["data"]
        self.assertEqual(med["dosage_unit"], "mg")
        self.assertTrue(med["is_active"])
        self.assertEqual(med["schedule_times"], ["08:00", "20:00"])

        resp = self.client.patch("/api/medications", json={"id": med["id"], "is_active": False, "user_id": "someone-else"})
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertFalse(resp.json()["data"]["is_active"])
        self.assertEqual(resp.json()["data"]["user_id"], self.user["id"])

        self.assertEqual(len(self.client.get("/api/medications").json()["data"]), 1)
        self.assertEqual(self.client.get("/api/medications", params={"active": "true"}).json()["data"], [])

        dose = {"medication_id": med["id"], "status": "taken", "scheduled_time": "2024-05-01T08:00:00Z"}
        resp = self.client.post("/api/medications/doses", json=dose)
        self.assertEqual(resp.status_code, 201, resp.text)
        self.assertEqual(resp.json()["data"]["status"], "taken")
        self.assertEqual(len(self.client.get("/api/medications/doses", params={"date": "2024-05-01"}).json()["data"]), 1)
        self.assertEqual(self.client.get("/api/medications/doses", params={"date": "2024-05-02"}).json()["data"], [])

        resp = self.client.delete("/api/medications", params={"id": med["id"]})
        self.assertEqual(resp.json(), {"message": "Medication deleted"})
        self.assertEqual(self.client.get("/api/medications").json()["data"], [])
        self.assertEqual(self.client.get("/api/medications/doses").json()["data"], [])

    def test_validation(self) -> None:
        resp = self.client.post("/api/medications", json={**self._BODY, "schedule_times": []})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "At least one schedule time is required"})

        resp = self.client.post("/api/medications", json={**self._BODY, "name": " "})
        self.assertEqual(resp.json(), {"error": "Medication name is required"})

        resp = self.client.post("/api/medications", json={**self._BODY, "frequency": "hourly"})
        self.assertEqual(resp.status_code, 400)

        resp = self.client.patch("/api/medications", json={"name": "x"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "Medication ID is required"})

        resp = self.client.patch("/api/medications", json={"id": "nope", "name": "x"})
        self.assertEqual(resp.status_code, 404)

        resp = self.client.delete("/api/medications")
        self.assertEqual(resp.json(), {"error": "Medication ID is required"})

        resp = self.client.post(
            "/api/medications/doses",
            json={"medication_id": "nope", "status": "taken", "scheduled_time": "08:00"},
        )
        self.assertEqual(resp.status_code, 404)

        resp = self.client.post(
            "/api/medications/doses",
            json={"medication_id": "nope", "status": "forgotten", "scheduled_time": "08:00"},
        )
        self.assertEqual(resp.status_code, 400)


class TestVitals(_WellnessCase):
    def test_record_list_delete(self) -> None:
        resp = self.client.post(
            "/api/vitals",
            json={"vital_type": "blood_pressure", "value": {"systolic": 120, "diastolic": 80}, "recorded_at": "2024-05-01T08:00:00Z"},
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        bp = resp.json()["data"]
        self.assertEqual(bp["value"], {"systolic": 120, "diastolic": 80})
        self.assertEqual(bp["recorded_at"], "2024-05-01T08:00:00Z")

        resp = self.client.post("/api/vitals", json={"vital_type": "weight", "value": {"value": 70.5}})
        self.assertEqual(resp.status_code, 201)

        self.assertEqual(len(self.client.get("/api/vitals").json()["data"]), 2)
        only_bp = self.client.get("/api/vitals", params={"type": "blood_pressure"}).json()["data"]
        self.assertEqual([v["id"] for v in only_bp], [bp["id"]])
        self.assertEqual(len(self.client.get("/api/vitals", params={"limit": 1}).json()["data"]), 1)

        resp = self.client.delete("/api/vitals", params={"id": bp["id"]})
        self.assertEqual(resp.json(), {"message": "Vital deleted"})
        self.assertEqual(len(self.client.get("/api/vitals").json()["data"]), 1)

    def test_validation(self) -> None:
        bad = [
            {"vital_type": "mood", "value": {"value": 1}},
            {"vital_type": "blood_pressure", "value": {"systolic": 300, "diastolic": 80}},
            {"vital_type": "heart_rate", "value": {}},
        ]
        for body in bad:
            with self.subTest(body=body):
                self.assertEqual(self.client.post("/api/vitals", json=body).status_code, 400)
        self.assertEqual(self.client.delete("/api/vitals").json(), {"error": "Vital ID is required"})


class TestTips(_WellnessCase):
    def test_random_tip_in_category(self) -> None:
        resp = self.client.get("/api/tips", params={"category": "fitness"})
        self.assertEqual(resp.status_code, 200)
        tip = resp.json()["tip"]
        self.assertEqual(tip["category"], "fitness")
        self.assertIn((tip["content"], tip["emoji"]), TIPS[TipCategory.fitness])

    def test_unknown_category_picks_any(self) -> None:
        tip = self.client.get("/api/tips", params={"category": "astrology"}).json()["tip"]
        self.assertIn((tip["content"], tip["emoji"]), TIPS[TipCategory(tip["category"])])

    def test_random_tip_is_seedable(self) -> None:
        self.assertEqual(random_tip(rng=random.Random(7)), random_tip(rng=random.Random(7)))

    def test_save_and_delete(self) -> None:
        resp = self.client.post("/api/tips", json={"category": "food", "content": "Eat greens", "emoji": "🥦"})
        self.assertEqual(resp.status_code, 201, resp.text)
        saved = resp.json()["data"]
        self.assertEqual(saved["category"], "food")

        resp = self.client.post("/api/tips", json={"category": "food", "content": ""})
        self.assertEqual(resp.status_code, 400)

        resp = self.client.delete("/api/tips", params={"id": saved["id"]})
        self.assertEqual(resp.json(), {"message": "Tip deleted"})
        self.assertEqual(self.client.delete("/api/tips").status_code, 400)


if __name__ == "__main__":
    unittest.main()
