"""Canned consultation predictions derived from the reported symptoms.

This is static demo configuration, not inference: each known symptom maps to a
fixed set of conditions, a base consultation length in minutes and an impact
score on a 0-10 scale.
"""
import math
from typing import Dict, Iterable, List, Mapping, TypedDict

class SymptomProfile(TypedDict):
    diseases: List[str]
    duration: int
    impact: int

class Prediction(TypedDict):
    duration: int
    diseases: List[str]
    impact: int

SYMPTOM_TABLE: Dict[str, SymptomProfile] = {
    "Chest pain": {
        "diseases": ["Angina", "Myocardial Infarction", "Costochondritis"],
        "duration": 30,
        "impact": 9,
    },
    "Fever": {
        "diseases": ["Viral Infection", "COVID-19", "Influenza"],
        "duration": 15,
        "impact": 6,
    },
    "Cough": {
        "diseases": ["Bronchitis", "Upper Respiratory Infection"],
        "duration": 10,
        "impact": 4,
    },
    "Back pain": {
        "diseases": ["Muscle Strain", "Herniated Disc", "Sciatica"],
        "duration": 20,
        "impact": 7,
    },
    "Headache": {
        "diseases": ["Migraine", "Tension Headache", "Sinusitis"],
        "duration": 20,
        "impact": 5,
    },
}

SEVERITY_MULTIPLIERS = {
    "severe": 1.3,
    "moderate": 1.2,
}

MAX_PREDICTED_DISEASES = 2

def severity_multiplier(severity: str) -> float:
    return SEVERITY_MULTIPLIERS.get((severity or "").lower(), 1.0)

def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))

def get_appointment_predictions(symptoms: Iterable[Mapping[str, str]]) -> Prediction:
    """Aggregate the table entries of every recognised symptom.

    Unknown symptom names are skipped. Duration is the severity-scaled sum of
    base durations, impact the highest single impact, and diseases the first
    two distinct conditions in the order they were encountered.
    """
    total_duration = 0.0
    max_impact = 0
    diseases: List[str] = []

    for symptom in symptoms:
        profile = SYMPTOM_TABLE.get(symptom.get("name", ""))
        if profile is None:
            continue

        total_duration += profile["duration"] * severity_multiplier(symptom.get("severity", ""))
        max_impact = max(max_impact, profile["impact"])
        for disease in profile["diseases"]:
            if disease not in diseases:
                diseases.append(disease)

    return {
        "duration": _round_half_up(total_duration),
        "diseases": diseases[:MAX_PREDICTED_DISEASES],
        "impact": max_impact,
    }
