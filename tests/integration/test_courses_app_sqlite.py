# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Integration tests running the configured application against SQLite.

The application starts through its lifespan with table creation and
seeding enabled, so requests go through the real dependencies, service,
session handling and logging setup.
"""

import pytest
from fastapi.testclient import TestClient

from registrar.api import create_app
from registrar.api.middleware import REQUEST_ID_HEADER

DABBI = "1212882659"
JON = "1234567890"


@pytest.fixture
def client(tmp_path, monkeypatch):
    """Start the application on a fresh SQLite file."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'registrar.db'}")
    monkeypatch.setenv("DB_CREATE_TABLES", "true")
    monkeypatch.setenv("DB_SEED", "true")
    monkeypatch.setenv("ENVIRONMENT", "development")

    with TestClient(create_app()) as client:
        yield client


@pytest.fixture
def course_id(client):
    """Create a one-seat course and return its id."""
    response = client.post(
        "/api/v1/courses",
        json={
            "template_id": "T-514-VEFT",
            "start_date": "2015-08-17T00:00:00",
            "end_date": "2015-11-08T00:00:00",
            "semester": "20153",
            "max_students": 1,
        },
    )
    assert response.status_code == 201
    return response.json()["id"]


@pytest.mark.integration
class TestCourseMutations:
    """Tests for writes through the running application."""

    def test_add_course(self, client):
        """Test creating a course answers 201 and is listed afterwards."""
        response = client.post(
            "/api/v1/courses",
            json={
                "template_id": "T-514-VEFT",
                "start_date": "2015-08-17T00:00:00",
                "end_date": "2015-11-08T00:00:00",
                "semester": "20153",
                "max_students": 10,
            },
            headers={REQUEST_ID_HEADER: "req-create"},
        )

        assert response.status_code == 201
        assert response.headers[REQUEST_ID_HEADER] == "req-create"
        body = response.json()
        assert body["name"] == "Vefþjónustur"
        assert body["student_count"] == 0

        listed = client.get("/api/v1/courses")
        assert listed.status_code == 200
        assert [c["id"] for c in listed.json()] == [body["id"]]

    def test_add_course_with_mixed_offsets(self, client):
        """Test an offset-aware start and a naive end are stored as UTC."""
        response = client.post(
            "/api/v1/courses",
            json={
                "template_id": "T-514-VEFT",
                "start_date": "2015-08-20T02:00:00+02:00",
                "end_date": "2015-11-20T00:00:00",
                "semester": "20153",
                "max_students": 10,
            },
        )

        assert response.status_code == 201
        assert response.json()["start_date"] == "2015-08-20T00:00:00"

        detail = client.get(f"/api/v1/courses/{response.json()['id']}")
        assert detail.json()["start_date"] == "2015-08-20T00:00:00"

    def test_enrollment_lifecycle(self, client, course_id):
        """Test enroll, full course, withdraw and waiting list through HTTP."""
        enrolled = client.post(f"/api/v1/courses/{course_id}/students", json={"ssn": DABBI})
        assert enrolled.status_code == 201
        assert enrolled.json()["ssn"] == DABBI

        full = client.post(f"/api/v1/courses/{course_id}/students", json={"ssn": JON})
        assert full.status_code == 412

        waiting = client.post(f"/api/v1/courses/{course_id}/waitinglist", json={"ssn": JON})
        assert waiting.status_code == 201
        twice = client.post(f"/api/v1/courses/{course_id}/waitinglist", json={"ssn": JON})
        assert twice.status_code == 409

        withdrawn = client.delete(f"/api/v1/courses/{course_id}/students/{DABBI}")
        assert withdrawn.status_code == 204

        promoted = client.post(f"/api/v1/courses/{course_id}/students", json={"ssn": JON})
        assert promoted.status_code == 201
        assert client.get(f"/api/v1/courses/{course_id}/waitinglist").json() == []

        students = client.get(f"/api/v1/courses/{course_id}/students").json()
        assert [s["ssn"] for s in students] == [JON]
        detail = client.get(f"/api/v1/courses/{course_id}").json()
        assert detail["student_count"] == 2

    def test_update_course(self, client, course_id):
        """Test replacing course dates answers 200."""
        response = client.put(
            f"/api/v1/courses/{course_id}",
            json={"start_date": "2015-09-01T00:00:00", "end_date": "2015-12-01T00:00:00"},
        )

        assert response.status_code == 200
        assert response.json()["start_date"] == "2015-09-01T00:00:00"

    def test_delete_course(self, client, course_id):
        """Test deleting a course answers 204 and the course is gone."""
        client.post(f"/api/v1/courses/{course_id}/students", json={"ssn": DABBI})
        client.post(f"/api/v1/courses/{course_id}/waitinglist", json={"ssn": JON})

        response = client.delete(f"/api/v1/courses/{course_id}")

        assert response.status_code == 204
        assert client.get(f"/api/v1/courses/{course_id}").status_code == 404

    def test_health_with_database(self, client):
        """Test health reports the database as healthy once started."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
