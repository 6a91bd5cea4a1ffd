"""API tests for signup and session endpoints."""

from __future__ import annotations

from django.conf import settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.models import User


class SignupAPITests(APITestCase):
    def setUp(self) -> None:
        self.url = reverse("users:signup")

    def _payload(self, **overrides) -> dict[str, str]:
        payload = {
            "email": "demo@user.io",
            "username": "Demo-lition",
            "password": "password",
            "firstName": "Demo",
            "lastName": "Lition",
        }
        payload.update(overrides)
        return payload

    def test_signup_returns_user_tokens_and_cookie(self) -> None:
        response = self.client.post(self.url, self._payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(
            dict(response.data["user"]),
            {
                "id": User.objects.get().id,
                "firstName": "Demo",
                "lastName": "Lition",
                "email": "demo@user.io",
                "username": "Demo-lition",
            },
        )
        self.assertIn("access", response.data["tokens"])
        self.assertIn(settings.AUTH_COOKIE_NAME, response.cookies)
        self.assertTrue(response.cookies[settings.AUTH_COOKIE_NAME]["httponly"])
        self.assertTrue(User.objects.get().check_password("password"))

    def test_signup_validation_messages(self) -> None:
        response = self.client.post(
            self.url,
            {"email": "nope", "username": "abc", "password": "123"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.data["errors"],
            {
                "email": "Please provide a valid email.",
                "username": "Please provide a username with at least 4 characters.",
                "password": "Password must be 6 characters or more.",
                "firstName": "First name is required.",
                "lastName": "Last name is required.",
            },
        )

    def test_username_cannot_be_an_email(self) -> None:
        response = self.client.post(self.url, self._payload(username="someone@user.io"), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["errors"]["username"], "Username cannot be an email.")

    def test_duplicate_email_and_username(self) -> None:
        self.client.post(self.url, self._payload(), format="json")

        response = self.client.post(self.url, self._payload(email="DEMO@user.io"), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["errors"]["email"], "User with that email already exists")
        self.assertEqual(response.data["errors"]["username"], "User with that username already exists")
        self.assertEqual(User.objects.count(), 1)


class SessionAPITests(APITestCase):
    def setUp(self) -> None:
        self.url = reverse("session:session")
        self.user = User.objects.create_user(
            username="Demo-lition",
            email="demo@user.io",
            password="password",
            first_name="Demo",
            last_name="Lition",
        )

    def test_login_with_username_or_email(self) -> None:
        for credential in ("Demo-lition", "DEMO@user.io"):
            response = self.client.post(self.url, {"credential": credential, "password": "password"}, format="json")

            self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
            self.assertEqual(response.data["user"]["id"], self.user.id)

    def test_invalid_credentials(self) -> None:
        response = self.client.post(self.url, {"credential": "Demo-lition", "password": "wrong"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data, {"message": "Invalid credentials"})

    def test_login_requires_both_fields(self) -> None:
        response = self.client.post(self.url, {}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.data["errors"],
            {
                "credential": "Please provide a valid email or username.",
                "password": "Please provide a password.",
            },
        )

    def test_cookie_restores_session_and_logout_clears_it(self) -> None:
        self.assertEqual(self.client.get(self.url).data, {"user": None})

        self.client.post(self.url, {"credential": "Demo-lition", "password": "password"}, format="json")
        response = self.client.get(self.url)
        self.assertEqual(response.data["user"]["username"], "Demo-lition")

        response = self.client.delete(self.url)
        self.assertEqual(response.data, {"message": "success"})
        self.assertEqual(self.client.get(self.url).data, {"user": None})

    def test_bearer_header_authenticates(self) -> None:
        login = self.client.post(self.url, {"credential": "Demo-lition", "password": "password"}, format="json")
        self.client.cookies.clear()
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['tokens']['access']}")

        response = self.client.get(reverse("users:current"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["user"]["email"], "demo@user.io")

    def test_stale_cookie_is_ignored(self) -> None:
        self.client.cookies[settings.AUTH_COOKIE_NAME] = "garbage"

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {"user": None})

    def test_current_user_requires_authentication(self) -> None:
        response = self.client.get(reverse("users:current"))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data, {"message": "Authentication required"})
