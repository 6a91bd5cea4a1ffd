"""Serializers for authentication flows (signup and login)."""

from __future__ import annotations

from typing import Any

from django.contrib.auth import get_user_model  # type: ignore
from django.core.exceptions import ValidationError as DjangoValidationError  # type: ignore
from django.core.validators import validate_email  # type: ignore
from django.db import transaction  # type: ignore
from rest_framework import exceptions, serializers  # type: ignore


User = get_user_model()


def _messages(message: str, *keys: str) -> dict[str, str]:
    return {key: message for key in ("required", "blank", "null", *keys)}


class SignupSerializer(serializers.Serializer):
    email = serializers.EmailField(
        max_length=254,
        error_messages=_messages("Please provide a valid email.", "invalid", "max_length"),
    )
    username = serializers.CharField(
        min_length=4,
        max_length=150,
        error_messages=_messages("Please provide a username with at least 4 characters.", "min_length", "max_length"),
    )
    password = serializers.CharField(
        min_length=6,
        write_only=True,
        trim_whitespace=False,
        error_messages=_messages("Password must be 6 characters or more.", "min_length"),
    )
    firstName = serializers.CharField(
        source="first_name",
        max_length=150,
        error_messages=_messages("First name is required.", "max_length"),
    )
    lastName = serializers.CharField(
        source="last_name",
        max_length=150,
        error_messages=_messages("Last name is required.", "max_length"),
    )

    def validate_email(self, value: str) -> str:
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError("User with that email already exists")
        return value

    def validate_username(self, value: str) -> str:
        try:
            validate_email(value)
        except DjangoValidationError:
            pass
        else:
            raise serializers.ValidationError("Username cannot be an email.")
        if User.objects.filter(username=value).exists():
            raise serializers.ValidationError("User with that username already exists")
        return value

    @transaction.atomic
    def create(self, validated_data: dict[str, Any]):  # type: ignore
        password = validated_data.pop("password")
        return User.objects.create_user(password=password, **validated_data)


class LoginSerializer(serializers.Serializer):
    credential = serializers.CharField(error_messages=_messages("Please provide a valid email or username."))
    password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        error_messages=_messages("Please provide a password."),
    )

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        user = User.objects.get_by_credential(attrs["credential"])
        if user is None or not user.is_active or not user.check_password(attrs["password"]):
            raise exceptions.AuthenticationFailed("Invalid credentials")
        attrs["user"] = user
        return attrs
