"""Rule tables for the early-detection symptom checker."""
from typing import Iterable, List

# Candidate conditions with their base probability and typical severity
CONDITIONS = [
    {
        "name": "Common Cold",
        "probability": 0.7,
        "severity": "mild",
        "symptoms": ["cough", "sore throat", "runny nose", "fever"],
    },
    {
        "name": "Influenza",
        "probability": 0.6,
        "severity": "moderate",
        "symptoms": ["fever", "body aches", "fatigue", "cough"],
    },
    {
        "name": "Pneumonia",
        "probability": 0.5,
        "severity": "severe",
        "symptoms": ["cough", "fever", "shortness of breath", "chest pain"],
    },
    {
        "name": "Bronchitis",
        "probability": 0.4,
        "severity": "moderate",
        "symptoms": ["cough", "wheezing", "shortness of breath", "chest discomfort"],
    },
    {
        "name": "Sinusitis",
        "probability": 0.3,
        "severity": "mild",
        "symptoms": ["facial pain", "nasal congestion", "headache", "fever"],
    },
]

SEVERITY_BASE_RATING = {
    "critical": 9,
    "severe": 7,
    "moderate": 5,
    "mild": 3,
}

SEVERITY_EXTRA_MINUTES = {
    "critical": 30,
    "severe": 20,
    "moderate": 15,
    "mild": 10,
}

SEVERITY_ADVICE = {
    "critical": ["Seek immediate medical attention", "Call emergency services if symptoms worsen"],
    "severe": ["Schedule an appointment as soon as possible", "Monitor symptoms closely"],
    "moderate": ["Schedule an appointment within 24-48 hours"],
}
DEFAULT_ADVICE = ["Schedule an appointment at your convenience"]

_HYDRATE = "Stay hydrated"
SYMPTOM_ADVICE = {
    "fever": ["Monitor temperature regularly", _HYDRATE, "Rest and avoid strenuous activity"],
    "cough": ["Use a humidifier", "Avoid irritants like smoke", _HYDRATE],
    "headache": ["Rest in a quiet, dark room", _HYDRATE, "Avoid bright lights and loud noises"],
    "nausea": [
        "Stay hydrated with small sips of water",
        "Avoid solid foods until symptoms improve",
        "Rest in a comfortable position",
    ],
    "diarrhea": [
        "Stay hydrated with electrolyte solutions",
        "Avoid dairy and fatty foods",
        "Eat bland foods like rice, bananas, and toast",
    ],
    "dizziness": ["Sit or lie down when feeling dizzy", "Avoid sudden movements", _HYDRATE],
    "fatigue": [
        "Get plenty of rest",
        "Maintain a regular sleep schedule",
        "Stay hydrated and eat nutritious meals",
    ],
    "muscle pain": ["Apply ice or heat as needed", "Rest the affected area", _HYDRATE],
}
SYMPTOM_ADVICE["vomiting"] = SYMPTOM_ADVICE["nausea"]

MIN_DURATION = 15

def calculate_emergency_rating(symptoms: List[str], severity: str, age: int, gender: str = "") -> int:
    rating = SEVERITY_BASE_RATING.get((severity or "").lower(), 1)
    if age < 12 or age > 65:
        rating += 1
    if len(symptoms) > 5:
        rating += 1
    return min(max(rating, 1), 10)

def predict_possible_conditions(symptoms: Iterable[str], severity: str) -> List[str]:
    """Return up to three condition names whose symptoms overlap and severity matches."""
    reported = [s.lower() for s in symptoms]
    severity = (severity or "").lower()

    matches = [
        condition
        for condition in CONDITIONS
        if condition["severity"] == severity
        and any(known in s for known in condition["symptoms"] for s in reported)
    ]
    matches.sort(key=lambda c: c["probability"], reverse=True)
    return [c["name"] for c in matches[:3]]

def estimate_appointment_duration(symptoms: List[str], severity: str, possible_conditions: List[str]) -> int:
    duration = MIN_DURATION + SEVERITY_EXTRA_MINUTES.get((severity or "").lower(), 0)
    duration += len(symptoms) * 5
    duration += len(possible_conditions) * 10
    return max(duration, MIN_DURATION)

def generate_recommendations(symptoms: Iterable[str], severity: str) -> List[str]:
    advice = list(SEVERITY_ADVICE.get((severity or "").lower(), DEFAULT_ADVICE))
    for symptom in symptoms:
        advice.extend(SYMPTOM_ADVICE.get(symptom.lower(), []))
    # dict preserves first-seen order while dropping repeats
    return list(dict.fromkeys(advice))

def risk_level(emergency_rating: int) -> str:
    if emergency_rating > 7:
        return "high"
    if emergency_rating > 4:
        return "medium"
    return "low"
