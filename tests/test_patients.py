class TestPatientProfile:
    def test_read_own_profile(self, client, patient):
        response = client.get("/api/v1/patients/me", headers=patient["headers"])
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["userId"] == patient["user"]["id"]
        assert data["id"] == patient["user"]["profileId"]
        assert data["email"] == "patient@example.com"
        assert data["allergies"] == []

    def test_update_profile(self, client, patient):
        response = client.patch("/api/v1/patients/me", headers=patient["headers"], json={
            "name": "Patricia Patient",
            "bloodGroup": "O+",
            "height": 170.5,
            "allergies": ["penicillin"],
            "emergencyContact": {"name": "Sam", "phone": "555-0100"},
        })
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == "Patricia Patient"
        assert data["bloodGroup"] == "O+"
        assert data["allergies"] == ["penicillin"]
        assert data["emergencyContact"]["name"] == "Sam"

    def test_invalid_height(self, client, patient):
        response = client.patch("/api/v1/patients/me", headers=patient["headers"], json={"height": -1})
        assert response.status_code == 422

    def test_doctors_are_forbidden(self, client, doctor):
        response = client.get("/api/v1/patients/me", headers=doctor["headers"])
        assert response.status_code == 403
