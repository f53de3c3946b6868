"""Consultation insights shown to the doctor for each appointment.

Rule-based scoring over the reported symptoms: an overall severity score,
likely conditions, drug reactions worth asking about, a consultation length
and three impact factors, all on fixed tables.
"""
import logging
import math
from typing import Dict, List, Mapping, Sequence, TypedDict

logger = logging.getLogger(__name__)

class PredictedDisease(TypedDict):
    name: str
    probability: float

class PossibleADR(TypedDict):
    drug: str
    reaction: str
    severity: str

class ImpactFactors(TypedDict):
    urgency: float
    complexity: float
    chronicity_risk: float

class Insights(TypedDict):
    predicted_diseases: List[PredictedDisease]
    possible_adrs: List[PossibleADR]
    estimated_consultation_time: int
    severity_score: float
    impact_factors: ImpactFactors

# Lower-case symptom name -> candidate conditions with their base probability
DISEASE_MAPPING: Dict[str, List[Dict[str, object]]] = {
    "fever": [
        {"name": "Viral Infection", "base_probability": 0.7},
        {"name": "Flu", "base_probability": 0.6},
        {"name": "COVID-19", "base_probability": 0.5},
        {"name": "Malaria", "base_probability": 0.3},
    ],
    "cough": [
        {"name": "Common Cold", "base_probability": 0.8},
        {"name": "Bronchitis", "base_probability": 0.6},
        {"name": "COVID-19", "base_probability": 0.5},
        {"name": "Asthma", "base_probability": 0.4},
    ],
    "headache": [
        {"name": "Tension Headache", "base_probability": 0.7},
        {"name": "Migraine", "base_probability": 0.5},
        {"name": "Sinusitis", "base_probability": 0.4},
    ],
    "chest pain": [
        {"name": "Muscle Strain", "base_probability": 0.6},
        {"name": "Anxiety", "base_probability": 0.5},
        {"name": "Angina", "base_probability": 0.4},
        {"name": "Heart Disease", "base_probability": 0.3},
    ],
    "fatigue": [
        {"name": "Anemia", "base_probability": 0.6},
        {"name": "Depression", "base_probability": 0.5},
        {"name": "Thyroid Issues", "base_probability": 0.4},
        {"name": "Chronic Fatigue Syndrome", "base_probability": 0.3},
    ],
    "shortness of breath": [
        {"name": "Anxiety", "base_probability": 0.6},
        {"name": "Asthma", "base_probability": 0.5},
        {"name": "COVID-19", "base_probability": 0.4},
        {"name": "Heart Failure", "base_probability": 0.3},
    ],
}

# Lower-case symptom name -> drugs that commonly cause it
ADR_MAPPING: Dict[str, List[Dict[str, str]]] = {
    "headache": [
        {"drug": "Aspirin", "reaction": "Stomach irritation", "base_severity": "moderate"},
        {"drug": "Ibuprofen", "reaction": "Gastrointestinal issues", "base_severity": "moderate"},
        {"drug": "Paracetamol", "reaction": "Liver stress", "base_severity": "low"},
    ],
    "dizziness": [
        {"drug": "Antidepressants", "reaction": "Blood pressure changes", "base_severity": "moderate"},
        {"drug": "Beta blockers", "reaction": "Fatigue", "base_severity": "moderate"},
        {"drug": "Antihistamines", "reaction": "Drowsiness", "base_severity": "low"},
    ],
    "nausea": [
        {"drug": "Antibiotics", "reaction": "Stomach upset", "base_severity": "moderate"},
        {"drug": "NSAIDs", "reaction": "Gastric irritation", "base_severity": "high"},
    ],
}

ADR_SEVERITY_LEVELS = ["low", "moderate", "high"]

MAX_SCORE = 10
MAX_PREDICTED_DISEASES = 3
REPEAT_BOOST = 0.2
BASE_CONSULTATION_MINUTES = 15

def _severity_weight(severity: str) -> int:
    severity = (severity or "").lower()
    if severity == "severe":
        return 3
    if severity == "moderate":
        return 2
    return 1

def _duration_weight(duration: str) -> float:
    if "month" in duration:
        return 2
    if "week" in duration:
        return 1.5
    return 1

def _chronicity(duration: str) -> int:
    if "month" in duration:
        return 3
    if "week" in duration:
        return 2
    return 1

def severity_score(symptoms: Sequence[Mapping[str, str]]) -> float:
    """Sum of severity x duration weights, capped at 10.

    Symptoms missing a severity or a duration do not count.
    """
    score = 0.0
    for symptom in symptoms:
        severity = symptom.get("severity") or ""
        duration = (symptom.get("duration") or "").lower()
        if not severity or not duration:
            logger.debug(f"Skipping incomplete symptom {symptom.get('name')!r} in severity score")
            continue
        score += _severity_weight(severity) * _duration_weight(duration)
    return min(MAX_SCORE, score)

def predict_diseases(symptoms: Sequence[Mapping[str, str]], score: float) -> List[PredictedDisease]:
    """Top three conditions.

    A condition's first mention scores its base probability plus a boost of
    ``score / 20``; every further mention adds 0.2. Probabilities cap at 1.
    """
    diseases: List[PredictedDisease] = []
    by_name: Dict[str, PredictedDisease] = {}
    for symptom in symptoms:
        for mapping in DISEASE_MAPPING.get((symptom.get("name") or "").lower(), []):
            existing = by_name.get(mapping["name"])
            if existing is not None:
                existing["probability"] = min(1.0, existing["probability"] + REPEAT_BOOST)
                continue
            disease: PredictedDisease = {
                "name": mapping["name"],
                "probability": min(1.0, mapping["base_probability"] + score / 20),
            }
            by_name[disease["name"]] = disease
            diseases.append(disease)

    diseases.sort(key=lambda d: d["probability"], reverse=True)
    return diseases[:MAX_PREDICTED_DISEASES]

def possible_adrs(symptoms: Sequence[Mapping[str, str]], score: float) -> List[PossibleADR]:
    """Drug reactions matching the symptoms, shifted one level up for scores
    above 7 and one level down for scores of 5 or less."""
    if score > 7:
        shift = 1
    elif score > 5:
        shift = 0
    else:
        shift = -1

    adrs: List[PossibleADR] = []
    for symptom in symptoms:
        for adr in ADR_MAPPING.get((symptom.get("name") or "").lower(), []):
            index = ADR_SEVERITY_LEVELS.index(adr["base_severity"]) + shift
            index = max(0, min(len(ADR_SEVERITY_LEVELS) - 1, index))
            adrs.append({
                "drug": adr["drug"],
                "reaction": adr["reaction"],
                "severity": ADR_SEVERITY_LEVELS[index],
            })
    return adrs

def generate_insights(symptoms: Sequence[Mapping[str, str]]) -> Insights:
    if not symptoms:
        raise ValueError("At least one symptom is required to generate insights")

    score = severity_score(symptoms)
    count = len(symptoms)

    complexity_factor = min(2, 1 + count * 0.2)
    severity_factor = 1 + score * 0.1
    consultation = math.floor(BASE_CONSULTATION_MINUTES * complexity_factor * severity_factor + 0.5)

    chronicity = sum(_chronicity((s.get("duration") or "").lower()) for s in symptoms)

    return {
        "predicted_diseases": predict_diseases(symptoms, score),
        "possible_adrs": possible_adrs(symptoms, score),
        "estimated_consultation_time": int(consultation),
        "severity_score": score,
        "impact_factors": {
            "urgency": min(MAX_SCORE, score * 1.2),
            "complexity": min(MAX_SCORE, count * 2 + score * 0.5),
            "chronicity_risk": min(MAX_SCORE, chronicity),
        },
    }
