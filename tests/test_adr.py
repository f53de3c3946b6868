from hms.services.adr_detection import (
    calculate_adr_severity, check_adverse_reactions, check_drug_interactions,
    detect_adverse_reactions, split_reactions
)

class TestDetection:
    def test_split_reactions(self):
        assert split_reactions(" rash, itching ,, hives ") == ["rash", "itching", "hives"]
        assert split_reactions("") == []

    def test_detects_matching_patterns(self):
        reactions = detect_adverse_reactions("Antibiotics course", ["rash", "itching", "hives"])
        assert reactions == [
            {"type": "skin reactions", "severity": "moderate", "confidence": 0.75},
            {"type": "allergic reaction", "severity": "severe", "confidence": 0.5},
        ]

    def test_threshold_is_exclusive(self):
        # one of four symptoms is 0.25, below the cut-off
        assert detect_adverse_reactions("antibiotics", ["nausea"]) == []

    def test_symptom_substring_matches(self):
        reactions = detect_adverse_reactions("painkillers", ["severe dizziness", "mild headache"])
        assert reactions == [{"type": "neurological", "severity": "severe", "confidence": 0.5}]

    def test_overlapping_categories_match_a_pattern_once(self):
        # gastrointestinal is linked to both categories but counted once
        reactions = detect_adverse_reactions(
            "painkillers antibiotics", ["nausea", "vomiting", "dizziness", "headache", "confusion"]
        )
        assert reactions == [
            {"type": "neurological", "severity": "severe", "confidence": 0.75},
            {"type": "gastrointestinal", "severity": "moderate", "confidence": 0.5},
        ]
        assert calculate_adr_severity(reactions) == "moderate"

    def test_unknown_medication(self):
        assert detect_adverse_reactions("amoxicillin", ["rash", "itching"]) == []

    def test_severity(self):
        assert calculate_adr_severity([]) == "none"
        assert calculate_adr_severity([
            {"type": "skin reactions", "severity": "moderate", "confidence": 0.75},
            {"type": "allergic reaction", "severity": "severe", "confidence": 0.5},
        ]) == "moderate"
        assert calculate_adr_severity([
            {"type": "cardiovascular", "severity": "critical", "confidence": 1.0},
        ]) == "critical"
        assert calculate_adr_severity([
            {"type": "respiratory", "severity": "moderate", "confidence": 0.67},
        ]) == "mild"

    def test_drug_interactions(self):
        assert check_drug_interactions(["Warfarin", "Aspirin", "Metformin"]) == [
            "Potential interaction between warfarin and aspirin",
            "Potential interaction between aspirin and warfarin",
        ]
        assert check_drug_interactions(["metformin"]) == []

    def test_adverse_reactions_respect_severity(self):
        symptoms = [{"name": "Unusual bleeding", "severity": "moderate"}]
        assert check_adverse_reactions(["warfarin"], symptoms) == []

        symptoms = [{"name": "Unusual bleeding", "severity": "severe"}]
        assert check_adverse_reactions(["warfarin"], symptoms) == [
            "Unusual bleeding may be an adverse reaction to warfarin"
        ]

class TestADREndpoints:
    def test_detect(self, client, patient):
        response = client.post("/api/v1/adr/detect", headers=patient["headers"], json={
            "medication": "antibiotics", "reaction": "rash, itching, hives"
        })
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["symptoms"] == ["rash", "itching", "hives"]
        assert data["severity"] == "moderate"
        assert data["reactions"][0]["type"] == "skin reactions"

    def test_submit_and_list_report(self, client, patient):
        response = client.post("/api/v1/adr/", headers=patient["headers"], json={
            "medication": "painkillers",
            "reaction": "dizziness, headache",
            "severity": "moderate",
            "date": "2024-05-01",
            "description": "Felt dizzy an hour after the dose",
        })
        assert response.status_code == 201
        report = response.json()["data"]
        assert report["status"] == "pending"
        assert report["computedSeverity"] == "moderate"
        assert report["detectedReactions"] == [{"type": "neurological", "severity": "severe", "confidence": 0.5}]

        reports = client.get("/api/v1/adr/", headers=patient["headers"]).json()["data"]
        assert [r["id"] for r in reports] == [report["id"]]

    def test_doctor_cannot_submit(self, client, seed_doctor):
        response = client.post("/api/v1/adr/", headers=seed_doctor["headers"], json={
            "medication": "painkillers", "reaction": "dizziness", "severity": "mild",
            "date": "2024-05-01", "description": "n/a",
        })
        assert response.status_code == 403

    def test_doctor_reads_patient_reports(self, client, patient, other_patient, seed_doctor):
        client.post("/api/v1/adr/", headers=patient["headers"], json={
            "medication": "steroids", "reaction": "nausea", "severity": "mild",
            "date": "2024-05-01", "description": "Upset stomach",
        })
        patient_id = patient["user"]["id"]

        response = client.get("/api/v1/adr/", headers=seed_doctor["headers"], params={"patient_id": patient_id})
        assert response.status_code == 200
        assert len(response.json()["data"]) == 1

        response = client.get("/api/v1/adr/", headers=other_patient["headers"], params={"patient_id": patient_id})
        assert response.status_code == 403
