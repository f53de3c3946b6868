from hms.services.predictions import _round_half_up, get_appointment_predictions, severity_multiplier

class TestAppointmentPredictions:
    def test_single_severe_symptom(self):
        result = get_appointment_predictions([{"name": "Chest pain", "severity": "Severe"}])
        assert result == {"duration": 39, "diseases": ["Angina", "Myocardial Infarction"], "impact": 9}

    def test_unknown_symptom(self):
        result = get_appointment_predictions([{"name": "Unknown symptom", "severity": "Mild"}])
        assert result == {"duration": 0, "diseases": [], "impact": 0}

    def test_no_symptoms(self):
        assert get_appointment_predictions([]) == {"duration": 0, "diseases": [], "impact": 0}

    def test_durations_add_and_impact_is_max(self):
        result = get_appointment_predictions([
            {"name": "Cough", "severity": "moderate"},
            {"name": "Back pain", "severity": "mild"},
        ])
        assert result["duration"] == 32
        assert result["impact"] == 7
        assert result["diseases"] == ["Bronchitis", "Upper Respiratory Infection"]

    def test_diseases_keep_first_seen_order(self):
        result = get_appointment_predictions([
            {"name": "Fever", "severity": "mild"},
            {"name": "Chest pain", "severity": "mild"},
        ])
        assert result["diseases"] == ["Viral Infection", "COVID-19"]
        assert result["duration"] == 45

    def test_names_are_case_sensitive(self):
        result = get_appointment_predictions([{"name": "chest pain", "severity": "severe"}])
        assert result["impact"] == 0

    def test_severity_multiplier_ignores_case(self):
        assert severity_multiplier("SEVERE") == 1.3
        assert severity_multiplier("Moderate") == 1.2
        assert severity_multiplier("mild") == 1.0
        assert severity_multiplier("") == 1.0

    def test_halves_round_up(self):
        assert _round_half_up(32.5) == 33
        assert _round_half_up(18.5) == 19
        assert _round_half_up(18.4) == 18
