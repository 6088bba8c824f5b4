"""
Integration tests for the record endpoints (athletes, metrics, workouts,
health stats).

Tests cover:
- Listing and ordering
- Creation with defaults and validation
- Deletion and 404 on unknown IDs
- Data store failures (502) and missing configuration (503)
"""
import pytest
from fastapi.testclient import TestClient

from tests.fakes import create_athlete_repo, create_metric_repo, create_workout_repo


pytestmark = pytest.mark.integration


@pytest.fixture
def client(app_with_fake_repos):
    return TestClient(app_with_fake_repos["app"])


@pytest.fixture
def repos(app_with_fake_repos):
    return app_with_fake_repos


# =============================================================================
# Athletes
# =============================================================================


class TestAthletesApi:
    """Tests for /athletes."""

    def test_list_empty(self, client):
        response = client.get("/athletes")

        assert response.status_code == 200
        assert response.json() == {"athletes": [], "count": 0}

    def test_list_sorted_by_name(self, client, repos):
        repos["athlete_repo"].seed(create_athlete_repo(names=["Zoe", "Ana"]).get_all())

        data = client.get("/athletes").json()

        assert data["count"] == 2
        assert [a["name"] for a in data["athletes"]] == ["Ana", "Zoe"]

    def test_create_with_defaults(self, client, repos):
        response = client.post("/athletes", json={"name": "Jane Runner", "sport": "Track"})

        assert response.status_code == 201
        athlete = response.json()
        assert athlete["name"] == "Jane Runner"
        assert athlete["height_cm"] == 0.0
        assert athlete["team"] == ""
        assert len(repos["athlete_repo"].get_all()) == 1

    def test_create_requires_name(self, client):
        response = client.post("/athletes", json={"name": ""})
        assert response.status_code == 422

    def test_negative_height_rejected(self, client):
        response = client.post("/athletes", json={"name": "Bo", "height_cm": -1})
        assert response.status_code == 422

    def test_store_failure_is_502(self, client, repos):
        repos["athlete_repo"].fail_with("connection reset")

        response = client.get("/athletes")

        assert response.status_code == 502
        assert response.json() == {
            "detail": "Data store request failed",
            "table": "athletes",
            "operation": "select",
        }


class TestDatabaseNotConfigured:
    """Requests fail with 503 when Supabase credentials are missing."""

    def test_503_without_credentials(self, app, monkeypatch):
        monkeypatch.setattr("api.deps.get_supabase_client", lambda: None)
        client = TestClient(app)

        response = client.get("/athletes")

        assert response.status_code == 503


# =============================================================================
# Performance metrics
# =============================================================================


class TestMetricsApi:
    """Tests for performance metric endpoints."""

    def test_list_newest_first_with_badge(self, client, repos):
        seeded = create_metric_repo(values=[9.0, 9.5], metric_type="speed")
        repos["metric_repo"].seed(seeded.get_all())

        data = client.get("/athletes/a1/metrics").json()

        assert data["count"] == 2
        assert [m["value"] for m in data["metrics"]] == [9.5, 9.0]
        assert data["metrics"][0]["badge_color"] == "blue"

    def test_unknown_type_badge(self, client, repos):
        repos["metric_repo"].seed([{
            "id": "m1", "athlete_id": "a1", "metric_type": "flexibility",
            "value": 30, "unit": "cm", "recorded_date": "2024-03-01",
        }])

        data = client.get("/athletes/a1/metrics").json()

        assert data["metrics"][0]["metric_type"] == "flexibility"
        assert data["metrics"][0]["badge_color"] == "slate"

    def test_create(self, client, repos):
        response = client.post("/athletes/a1/metrics", json={
            "metric_type": "strength",
            "value": 120.5,
            "unit": "kg",
            "recorded_date": "2024-03-05",
        })

        assert response.status_code == 201
        metric = response.json()
        assert metric["athlete_id"] == "a1"
        assert metric["recorded_date"] == "2024-03-05"
        assert metric["badge_color"] == "green"
        stored = repos["metric_repo"].get_all()[0]
        assert stored["recorded_date"] == "2024-03-05"

    def test_create_requires_unit(self, client):
        response = client.post("/athletes/a1/metrics", json={
            "value": 1.0, "recorded_date": "2024-03-05",
        })
        assert response.status_code == 422

    def test_create_rejects_bad_date(self, client):
        response = client.post("/athletes/a1/metrics", json={
            "value": 1.0, "unit": "s", "recorded_date": "tomorrow",
        })
        assert response.status_code == 422

    @pytest.mark.parametrize("raw_value", ['"NaN"', '"Infinity"', '"-inf"'])
    def test_create_rejects_non_finite_value(self, client, repos, raw_value):
        body = '{"value": %s, "unit": "s", "recorded_date": "2024-03-05"}' % raw_value

        response = client.post(
            "/athletes/a1/metrics",
            content=body,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422
        assert repos["metric_repo"].get_all() == []

    def test_delete(self, client, repos):
        repos["metric_repo"].seed([{
            "id": "m1", "athlete_id": "a1", "metric_type": "speed",
            "value": 1, "unit": "s", "recorded_date": "2024-03-01",
        }])

        response = client.delete("/metrics/m1")

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert repos["metric_repo"].get_all() == []

    def test_delete_unknown_is_404(self, client):
        assert client.delete("/metrics/missing").status_code == 404


# =============================================================================
# Workouts
# =============================================================================


class TestWorkoutsApi:
    """Tests for workout endpoints."""

    def test_list_with_intensity_color(self, client, repos):
        repos["workout_repo"].seed(create_workout_repo(num_workouts=3).get_all())

        data = client.get("/athletes/a1/workouts").json()

        assert data["count"] == 3
        # Newest first: 2024-03-03 is the third generated workout (high)
        assert data["workouts"][0]["workout_date"] == "2024-03-03"
        assert data["workouts"][0]["intensity"] == "high"
        assert data["workouts"][0]["intensity_color"] == "red"

    def test_malformed_row_skipped(self, client, repos):
        repos["workout_repo"].seed(create_workout_repo(num_workouts=1).get_all())
        repos["workout_repo"].seed([{
            "id": "bad", "athlete_id": "a1", "workout_type": "Run",
            "duration_minutes": 30, "workout_date": "not a date",
        }])

        data = client.get("/athletes/a1/workouts").json()

        assert data["count"] == 1

    def test_create_defaults_to_moderate(self, client):
        response = client.post("/athletes/a1/workouts", json={
            "workout_type": "Cycling",
            "duration_minutes": 60,
            "workout_date": "2024-03-05",
        })

        assert response.status_code == 201
        assert response.json()["intensity"] == "moderate"
        assert response.json()["intensity_color"] == "yellow"

    def test_create_rejects_unknown_intensity(self, client):
        response = client.post("/athletes/a1/workouts", json={
            "workout_type": "Cycling",
            "duration_minutes": 60,
            "intensity": "extreme",
            "workout_date": "2024-03-05",
        })
        assert response.status_code == 422

    def test_create_rejects_negative_duration(self, client):
        response = client.post("/athletes/a1/workouts", json={
            "workout_type": "Cycling",
            "duration_minutes": -1,
            "workout_date": "2024-03-05",
        })
        assert response.status_code == 422

    def test_delete_unknown_is_404(self, client):
        assert client.delete("/workouts/missing").status_code == 404

    def test_insert_failure_is_502(self, client, repos):
        repos["workout_repo"].fail_with("insert rejected")

        response = client.post("/athletes/a1/workouts", json={
            "workout_type": "Run", "duration_minutes": 20, "workout_date": "2024-03-05",
        })

        assert response.status_code == 502
        assert response.json()["operation"] == "insert"


# =============================================================================
# Health stats
# =============================================================================


class TestHealthStatsApi:
    """Tests for health stat endpoints."""

    def test_create_and_latest(self, client):
        client.post("/athletes/a1/health-stats", json={
            "heart_rate": 62, "stress_level": 2, "recorded_date": "2024-03-01",
        })
        client.post("/athletes/a1/health-stats", json={
            "heart_rate": 58, "stress_level": 8, "hydration_level": "poor",
            "recorded_date": "2024-03-04",
        })

        response = client.get("/athletes/a1/health-stats/latest")

        assert response.status_code == 200
        latest = response.json()
        assert latest["heart_rate"] == 58
        assert latest["stress_label"] == "high"
        assert latest["stress_color"] == "red"
        assert latest["hydration_color"] == "red"

    def test_create_defaults(self, client):
        response = client.post("/athletes/a1/health-stats", json={"recorded_date": "2024-03-01"})

        assert response.status_code == 201
        stat = response.json()
        assert stat["hydration_level"] == "fair"
        assert stat["stress_level"] == 5
        assert stat["stress_label"] == "moderate"
        assert stat["blood_pressure_systolic"] == 0

    def test_latest_404_when_empty(self, client):
        assert client.get("/athletes/a1/health-stats/latest").status_code == 404

    def test_stress_level_bounds(self, client):
        response = client.post("/athletes/a1/health-stats", json={
            "stress_level": 11, "recorded_date": "2024-03-01",
        })
        assert response.status_code == 422

    def test_list_and_delete(self, client):
        created = client.post("/athletes/a1/health-stats", json={
            "recorded_date": "2024-03-01",
        }).json()

        assert client.get("/athletes/a1/health-stats").json()["count"] == 1
        assert client.delete(f"/health-stats/{created['id']}").status_code == 200
        assert client.get("/athletes/a1/health-stats").json()["count"] == 0


# =============================================================================
# Health check
# =============================================================================


class TestHealthCheck:
    """Tests for liveness and readiness."""

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_ready_reports_missing_database(self, client):
        data = client.get("/health/ready").json()

        assert data["status"] == "degraded"
        assert data["database_configured"] is False
        assert data["environment"] == "test"
