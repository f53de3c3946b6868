from hms.services.early_detection import (
    calculate_emergency_rating, estimate_appointment_duration, generate_recommendations,
    predict_possible_conditions, risk_level
)

class TestRules:
    def test_emergency_rating(self):
        assert calculate_emergency_rating(["fever"], "moderate", 30) == 5
        assert calculate_emergency_rating(["fever"], "moderate", 70) == 6
        assert calculate_emergency_rating(["a", "b", "c", "d", "e", "f"], "critical", 5) == 10
        assert calculate_emergency_rating(["fever"], "unknown", 30) == 1

    def test_possible_conditions_match_severity(self):
        assert predict_possible_conditions(["Fever", "Cough"], "moderate") == ["Influenza", "Bronchitis"]
        assert predict_possible_conditions(["fever"], "mild") == ["Common Cold", "Sinusitis"]
        assert predict_possible_conditions(["rash"], "mild") == []

    def test_duration(self):
        assert estimate_appointment_duration(["fever", "cough"], "moderate", ["Influenza", "Bronchitis"]) == 60
        assert estimate_appointment_duration([], "", []) == 15

    def test_recommendations_are_deduplicated(self):
        advice = generate_recommendations(["fever", "cough"], "moderate")
        assert advice[0] == "Schedule an appointment within 24-48 hours"
        assert advice.count("Stay hydrated") == 1
        assert "Use a humidifier" in advice

    def test_risk_level(self):
        assert risk_level(8) == "high"
        assert risk_level(7) == "medium"
        assert risk_level(5) == "medium"
        assert risk_level(4) == "low"

class TestEarlyDetectionEndpoints:
    payload = {
        "symptoms": ["fever", "cough"],
        "severity": "moderate",
        "age": 30,
        "gender": "female",
        "medicalHistory": ["asthma"],
    }

    def test_analyse_and_store(self, client, patient):
        response = client.post("/api/v1/early-detection/", headers=patient["headers"], json=self.payload)
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["emergencyRating"] == 5
        assert data["riskLevel"] == "medium"
        assert data["potentialConditions"] == ["Influenza", "Bronchitis"]
        assert data["estimatedDuration"] == 60
        assert data["status"] == "completed"

        response = client.get(f"/api/v1/early-detection/{data['id']}", headers=patient["headers"])
        assert response.status_code == 200

    def test_rejects_bad_input(self, client, patient):
        response = client.post("/api/v1/early-detection/", headers=patient["headers"], json={
            **self.payload, "symptoms": []
        })
        assert response.status_code == 422

        response = client.post("/api/v1/early-detection/", headers=patient["headers"], json={
            **self.payload, "severity": "extreme"
        })
        assert response.status_code == 422

    def test_list_filters(self, client, patient):
        client.post("/api/v1/early-detection/", headers=patient["headers"], json=self.payload)
        client.post("/api/v1/early-detection/", headers=patient["headers"], json={
            **self.payload, "severity": "critical", "age": 80
        })

        records = client.get("/api/v1/early-detection/", headers=patient["headers"]).json()["data"]
        assert len(records) == 2

        high = client.get(
            "/api/v1/early-detection/", headers=patient["headers"], params={"risk_level": "high"}
        ).json()["data"]
        assert [r["severity"] for r in high] == ["critical"]

        old = client.get(
            "/api/v1/early-detection/", headers=patient["headers"], params={"end_date": "2000-01-01"}
        ).json()["data"]
        assert old == []

    def test_records_are_private(self, client, patient, other_patient):
        record = client.post(
            "/api/v1/early-detection/", headers=patient["headers"], json=self.payload
        ).json()["data"]

        response = client.get(f"/api/v1/early-detection/{record['id']}", headers=other_patient["headers"])
        assert response.status_code == 404
        response = client.delete(f"/api/v1/early-detection/{record['id']}", headers=other_patient["headers"])
        assert response.status_code == 404

        response = client.delete(f"/api/v1/early-detection/{record['id']}", headers=patient["headers"])
        assert response.status_code == 200
        assert client.get("/api/v1/early-detection/", headers=patient["headers"]).json()["data"] == []
