# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from fastapi import HTTPException
from fastapi.testclient import TestClient

from alagapp.auth.security import create_access_token, decode_token, hash_password, verify_password
from alagapp.config import Settings

from .helpers import PASSWORD, cleanup, make_app, register


class TestPasswordsAndTokens(unittest.TestCase):
    def test_password_hash_roundtrip(self) -> None:
        hashed = hash_password("Secret123")
        self.assertTrue(verify_password("Secret123", hashed))
        self.assertFalse(verify_password("secret123", hashed))
        self.assertFalse(verify_password("Secret123", "not-a-hash"))

    def test_token_signature_is_checked(self) -> None:
        settings = Settings({"ALAGAPP_JWT_SECRET": "one"})
        token = create_access_token(settings, user_id="u1", email="a@b.co")
        self.assertEqual(decode_token(settings, token)["sub"], "u1")
        with self.assertRaises(Exception):
            decode_token(Settings({"ALAGAPP_JWT_SECRET": "two"}), token)

    def test_malformed_tokens_are_unauthorized(self) -> None:
        settings = Settings({"ALAGAPP_JWT_SECRET": "one"})
        token = create_access_token(settings, user_id="u1", email="a@b.co")
        header, payload, sig = token.split(".")
        for bad in ("garbage", f"{header}.{sig}", f"{header}.{payload}.{sig}.extra", f"{header}.{payload}x.{sig}"):
            with self.subTest(token=bad):
                with self.assertRaises(HTTPException) as ctx:
                    decode_token(settings, bad)
                self.assertEqual(ctx.exception.status_code, 401)
                self.assertEqual(ctx.exception.detail, "Invalid token")


class TestAuthApi(unittest.TestCase):
    def setUp(self) -> None:
        self.app, self._tmp = make_app()
        self.client = TestClient(self.app)

    def tearDown(self) -> None:
        self.client.close()
        cleanup(self._tmp)

    def test_health_is_public(self) -> None:
        resp = self.client.get("/api/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"ok": True})

    def test_register_me_logout_login(self) -> None:
        data = register(self.client, email="Demo@Example.com")
        self.assertEqual(data["user"]["email"], "demo@example.com")
        self.assertEqual(data["user"]["full_name"], "Demo User")
        self.assertTrue(data["token"])

        resp = self.client.get("/api/auth/me")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["id"], data["user"]["id"])

        resp = self.client.post("/api/auth/logout")
        self.assertEqual(resp.json(), {"message": "Logged out successfully"})
        self.assertEqual(self.client.get("/api/auth/me").status_code, 401)

        resp = self.client.post("/api/auth/login", json={"email": "demo@example.com", "password": PASSWORD})
        self.assertEqual(resp.status_code, 200)
        token = resp.json()["token"]

        bearer = TestClient(self.app)
        resp = bearer.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(resp.status_code, 200)
        bearer.close()

    def test_register_validation(self) -> None:
        cases = [
            ({"fullName": "A", "email": "a@example.com", "password": PASSWORD}, None),
            ({"fullName": "Ann", "email": "nope", "password": PASSWORD}, "Please enter a valid email"),
            ({"fullName": "Ann", "email": "a@example.com", "password": "password123"},
             "Password must contain at least one uppercase letter"),
            ({"fullName": "Ann", "email": "a@example.com", "password": "Passwordxx"},
             "Password must contain at least one number"),
        ]
        for body, message in cases:
            with self.subTest(body=body):
                resp = self.client.post("/api/auth/register", json=body)
                self.assertEqual(resp.status_code, 400)
                if message:
                    self.assertEqual(resp.json(), {"error": message})

    def test_duplicate_email(self) -> None:
        register(self.client)
        resp = self.client.post(
            "/api/auth/register",
            json={"fullName": "Other", "email": "demo@example.com", "password": PASSWORD},
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "Email already registered"})

    def test_login_wrong_password(self) -> None:
        register(self.client)
        resp = self.client.post("/api/auth/login", json={"email": "demo@example.com", "password": "Wrong1234"})
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"error": "Invalid email or password"})

    def test_protected_routes_need_a_session(self) -> None:
        for path in ("/api/check-ins", "/api/medications", "/api/vitals", "/api/ai/usage"):
            with self.subTest(path=path):
                resp = self.client.get(path)
                self.assertEqual(resp.status_code, 401)
                self.assertEqual(resp.json(), {"error": "Unauthorized"})


if __name__ == "__main__":
    unittest.main()
