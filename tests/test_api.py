"""HTTP-level tests: routing, error envelopes and history recording."""

from api.history import get_user_calculations
from core.exceptions import NotFoundError, ValidationError


class TestCalculatorEndpoints:

    def test_bmi(self, client):
        response = client.post("/api/calculators/bmi", json={"height": 175, "weight": 70})
        assert response.status_code == 200
        assert response.json() == {
            "bmi": 22.9,
            "category": "normal",
            "message": "Your BMI indicates that you have a normal weight. Maintain your healthy lifestyle!",
        }

    def test_bmi_out_of_range_lists_all_violations(self, client):
        response = client.post("/api/calculators/bmi", json={"height": 10, "weight": 900})
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["message"] == "Validation failed"
        assert {v["field"] for v in error["details"]["violations"]} == {"height", "weight"}

    def test_numeric_strings_are_coerced_at_the_boundary(self, client):
        response = client.post("/api/calculators/bmi", json={"height": "200", "weight": "74"})
        assert response.status_code == 200
        assert response.json()["bmi"] == 18.5

    def test_unparseable_body_is_422(self, client):
        response = client.post("/api/calculators/bmi", json={"height": "tall"})
        assert response.status_code == 422
        fields = {v["field"] for v in response.json()["error"]["details"]["violations"]}
        assert fields == {"height", "weight"}

    def test_calories_uses_camel_case_activity_level(self, client):
        response = client.post("/api/calculators/calories", json={
            "gender": "male", "age": 30, "height": 180, "weight": 80, "activityLevel": 1.55, "goal": "maintain",
        })
        assert response.status_code == 200
        assert response.json() == {"calories": 2759, "macros": {"protein": 160, "carbs": 357, "fats": 77}}

    def test_calories_bad_goal(self, client):
        response = client.post("/api/calculators/calories", json={
            "gender": "male", "age": 30, "height": 180, "weight": 80, "activityLevel": 1.55, "goal": "bulk",
        })
        assert response.status_code == 400
        violations = response.json()["error"]["details"]["violations"]
        assert violations[0]["field"] == "goal"
        assert violations[0]["constraint"] == "enum"

    def test_bodyfat(self, client):
        response = client.post("/api/calculators/bodyfat", json={
            "gender": "male", "age": 30, "height": 180, "weight": 80, "neck": 38, "waist": 85,
        })
        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"bodyFat", "category", "message", "clamped"}
        assert body["category"] == "fitness"
        assert body["clamped"] is False

    def test_bodyfat_female_without_hip(self, client):
        response = client.post("/api/calculators/bodyfat", json={
            "gender": "female", "age": 30, "height": 165, "weight": 60, "neck": 35, "waist": 75,
        })
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Hip measurement is required for females"

    def test_bodyfat_invalid_combination(self, client):
        response = client.post("/api/calculators/bodyfat", json={
            "gender": "male", "age": 30, "height": 180, "weight": 80, "neck": 80, "waist": 40,
        })
        assert response.status_code == 422
        assert response.json()["error"]["message"] == "Invalid measurement combination"


class TestHistory:

    def test_calculations_are_recorded_only_for_known_users(self, client, db):
        client.post("/api/calculators/bmi", json={"height": 175, "weight": 70})
        client.post("/api/calculators/bmi?user_id=u1", json={"height": 175, "weight": 70})
        client.post("/api/calculators/bodyfat?user_id=u1", json={
            "gender": "female", "age": 30, "height": 165, "weight": 60, "neck": 35, "waist": 75, "hip": 95,
        })

        response = client.get("/api/users/u1/calculations")
        assert response.status_code == 200
        calculations = response.json()["calculations"]
        assert [c["type"] for c in calculations] == ["bodyfat", "bmi"]
        assert calculations[1]["value"] == "22.9"
        assert calculations[0]["details"]["hip"] == 95
        assert calculations[0]["details"]["category"] == "fitness"

        only_bmi = client.get("/api/users/u1/calculations?type=bmi").json()["calculations"]
        assert len(only_bmi) == 1

    def test_failed_calculation_is_not_recorded(self, client, db):
        client.post("/api/calculators/bodyfat?user_id=u2", json={
            "gender": "male", "age": 30, "height": 180, "weight": 80, "neck": 80, "waist": 40,
        })
        assert get_user_calculations(user_id="u2", calc_type=None, db=db).calculations == []

    def test_unknown_type_is_400(self, client):
        response = client.get("/api/users/u1/calculations?type=steps")
        assert response.status_code == 400
        assert response.json()["error"]["details"]["field"] == "type"


class TestVideos:

    def test_list_and_filter(self, client):
        assert len(client.get("/api/videos").json()["videos"]) == 5
        cardio = client.get("/api/videos?category=cardio").json()["videos"]
        assert [v["video_id"] for v in cardio] == ["ml6cT4AZdqI"]

    def test_get_single_video(self, client):
        first = client.get("/api/videos").json()["videos"][0]
        response = client.get(f"/api/videos/{first['id']}")
        assert response.status_code == 200
        assert response.json()["video"] == first

    def test_missing_video_is_404(self, client):
        response = client.get("/api/videos/9999")
        assert response.status_code == 404
        assert response.json()["error"]["details"]["resource"] == "WorkoutVideo"


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy", "database": "connected"}


def test_exception_classes_have_proper_attributes():
    exc = NotFoundError("WorkoutVideo", 123)
    assert exc.status_code == 404
    assert "123" in exc.message

    exc = ValidationError("Invalid input", field="age")
    assert exc.status_code == 400
    assert exc.details == {"field": "age"}
    assert exc.violations == []
