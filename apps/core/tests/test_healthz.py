"""Tests for the health check endpoint."""

from __future__ import annotations

from unittest import mock

import pytest
from django.db import DatabaseError
from django.urls import reverse


@pytest.mark.django_db
def test_healthz_reports_connected_database(client):
    response = client.get(reverse("healthz"))

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "connected"}


@pytest.mark.django_db
def test_healthz_reports_unavailable_database(client):
    with mock.patch("apps.core.views.connection") as connection:
        connection.cursor.side_effect = DatabaseError("could not connect")
        response = client.get(reverse("healthz"))

    assert response.status_code == 503
    assert response.json() == {"status": "unavailable", "error": "could not connect"}


def test_healthz_rejects_post(client):
    assert client.post(reverse("healthz")).status_code == 405
