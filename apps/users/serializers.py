"""Serializers for user-related API payloads."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

User = get_user_model()


class SafeUserSerializer(serializers.ModelSerializer):
    """The public view of the logged-in user (never exposes the password)."""

    firstName = serializers.CharField(source="first_name", read_only=True)
    lastName = serializers.CharField(source="last_name", read_only=True)

    class Meta:
        model = User
        fields = ["id", "firstName", "lastName", "email", "username"]
        read_only_fields = fields


class UserSummarySerializer(serializers.ModelSerializer):
    """Owner / guest block embedded in spot, booking and review payloads."""

    firstName = serializers.CharField(source="first_name", read_only=True)
    lastName = serializers.CharField(source="last_name", read_only=True)

    class Meta:
        model = User
        fields = ["id", "firstName", "lastName"]
        read_only_fields = fields
