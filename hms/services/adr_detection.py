"""Keyword-based adverse drug reaction (ADR) screening.

All lookups run against the fixed tables below. Nothing here is clinical
inference; results are hints for the care team to review.
"""
from typing import Dict, Iterable, List, Mapping, TypedDict

class DetectedReaction(TypedDict):
    type: str
    severity: str
    confidence: float

# Known reactions between medications, keyed by lower-case drug name
DRUG_INTERACTIONS: Dict[str, List[str]] = {
    "aspirin": ["warfarin", "heparin", "clopidogrel", "ibuprofen", "naproxen"],
    "ibuprofen": ["aspirin", "warfarin", "lisinopril", "hydrochlorothiazide"],
    "warfarin": ["aspirin", "ibuprofen", "amiodarone", "fluconazole", "ciprofloxacin"],
    "fluoxetine": ["monoamine oxidase inhibitors", "tramadol", "triptans"],
    "lisinopril": ["potassium supplements", "spironolactone", "losartan"],
    "atorvastatin": ["cyclosporine", "erythromycin", "clarithromycin", "gemfibrozil"],
    "levothyroxine": ["calcium supplements", "iron supplements", "antacids"],
    "amoxicillin": ["probenecid", "allopurinol", "oral contraceptives"],
    "metformin": ["furosemide", "nifedipine", "cimetidine"],
    "insulin": ["beta-blockers", "alcohol", "sulfonylureas"],
}

# Documented side effects and the severity at which they are usually reported
MEDICATION_ADVERSE_EFFECTS: Dict[str, List[Dict[str, str]]] = {
    "aspirin": [
        {"symptom": "stomach pain", "severity": "moderate"},
        {"symptom": "heartburn", "severity": "mild"},
        {"symptom": "nausea", "severity": "mild"},
        {"symptom": "ringing in ears", "severity": "moderate"},
    ],
    "ibuprofen": [
        {"symptom": "stomach pain", "severity": "moderate"},
        {"symptom": "headache", "severity": "mild"},
        {"symptom": "dizziness", "severity": "mild"},
    ],
    "lisinopril": [
        {"symptom": "dry cough", "severity": "moderate"},
        {"symptom": "dizziness", "severity": "moderate"},
        {"symptom": "headache", "severity": "mild"},
    ],
    "metformin": [
        {"symptom": "nausea", "severity": "moderate"},
        {"symptom": "diarrhea", "severity": "moderate"},
        {"symptom": "stomach pain", "severity": "mild"},
    ],
    "atorvastatin": [
        {"symptom": "muscle pain", "severity": "moderate"},
        {"symptom": "joint pain", "severity": "moderate"},
        {"symptom": "weakness", "severity": "mild"},
    ],
    "levothyroxine": [
        {"symptom": "rapid heartbeat", "severity": "moderate"},
        {"symptom": "anxiety", "severity": "moderate"},
        {"symptom": "insomnia", "severity": "mild"},
    ],
    "warfarin": [
        {"symptom": "unusual bleeding", "severity": "severe"},
        {"symptom": "bruising", "severity": "moderate"},
    ],
    "fluoxetine": [
        {"symptom": "insomnia", "severity": "moderate"},
        {"symptom": "nausea", "severity": "mild"},
        {"symptom": "headache", "severity": "mild"},
        {"symptom": "anxiety", "severity": "moderate"},
    ],
}

ADR_PATTERNS: Dict[str, Dict[str, object]] = {
    "allergic reaction": {
        "symptoms": ["rash", "itching", "swelling", "difficulty breathing"],
        "severity": "severe",
    },
    "gastrointestinal": {
        "symptoms": ["nausea", "vomiting", "diarrhea", "stomach pain"],
        "severity": "moderate",
    },
    "neurological": {
        "symptoms": ["dizziness", "headache", "confusion", "seizures"],
        "severity": "severe",
    },
    "cardiovascular": {
        "symptoms": ["chest pain", "irregular heartbeat", "high blood pressure"],
        "severity": "critical",
    },
    "respiratory": {
        "symptoms": ["cough", "shortness of breath", "wheezing"],
        "severity": "moderate",
    },
    "skin reactions": {
        "symptoms": ["rash", "hives", "itching", "redness"],
        "severity": "moderate",
    },
}

# Drug category (matched as a substring of the medication name) -> ADR patterns
MEDICATION_ADR_ASSOCIATIONS: Dict[str, List[str]] = {
    "antibiotics": ["allergic reaction", "gastrointestinal", "skin reactions"],
    "painkillers": ["gastrointestinal", "neurological", "allergic reaction"],
    "antidepressants": ["neurological", "cardiovascular"],
    "blood pressure": ["cardiovascular", "respiratory"],
    "antihistamines": ["neurological", "skin reactions"],
    "steroids": ["gastrointestinal", "skin reactions", "cardiovascular"],
}

CONFIDENCE_THRESHOLD = 0.3

SEVERITY_WEIGHTS = {
    "critical": 4,
    "severe": 3,
    "moderate": 2,
    "mild": 1,
}

_SYMPTOM_LEVELS = {"severe": 3, "moderate": 2}

def split_reactions(reaction_text: str) -> List[str]:
    """Split a comma-separated reaction description into symptom tokens."""
    return [part.strip() for part in (reaction_text or "").split(",") if part.strip()]

def check_drug_interactions(medication_names: Iterable[str]) -> List[str]:
    names = [name.lower() for name in medication_names]
    warnings = []
    for i, current in enumerate(names):
        interacting = DRUG_INTERACTIONS.get(current, [])
        for j, other in enumerate(names):
            if i != j and other in interacting:
                warnings.append(f"Potential interaction between {current} and {other}")
    return warnings

def check_adverse_reactions(
    medication_names: Iterable[str],
    symptoms: Iterable[Mapping[str, str]],
) -> List[str]:
    """Flag reported symptoms that match a known side effect of a medication.

    A symptom is flagged when the patient reports it at least as severe as the
    side effect is usually reported.
    """
    by_name = {s["name"].lower(): s for s in symptoms if s.get("name")}
    warnings = []
    for medication in medication_names:
        for effect in MEDICATION_ADVERSE_EFFECTS.get(medication.lower(), []):
            reported = by_name.get(effect["symptom"])
            if reported is None:
                continue
            reported_level = _SYMPTOM_LEVELS.get((reported.get("severity") or "").lower(), 1)
            effect_level = _SYMPTOM_LEVELS.get(effect["severity"], 1)
            if reported_level >= effect_level:
                warnings.append(f"{reported['name']} may be an adverse reaction to {medication}")
    return warnings

def detect_adverse_reactions(medication: str, symptoms: Iterable[str]) -> List[DetectedReaction]:
    medication_lower = (medication or "").lower()
    symptoms_lower = [s.lower() for s in symptoms]

    patterns: List[str] = []
    for category, category_patterns in MEDICATION_ADR_ASSOCIATIONS.items():
        if category in medication_lower:
            patterns.extend(p for p in category_patterns if p not in patterns)

    detected: List[DetectedReaction] = []
    for pattern in patterns:
        data = ADR_PATTERNS.get(pattern)
        if data is None:
            continue
        pattern_symptoms = data["symptoms"]
        matched = [p for p in pattern_symptoms if any(p in s for s in symptoms_lower)]
        confidence = len(matched) / len(pattern_symptoms)
        if confidence > CONFIDENCE_THRESHOLD:
            detected.append({
                "type": pattern,
                "severity": data["severity"],
                "confidence": round(confidence, 2),
            })

    detected.sort(key=lambda r: r["confidence"], reverse=True)
    return detected

def calculate_adr_severity(reactions: List[DetectedReaction]) -> str:
    if not reactions:
        return "none"

    total = sum(SEVERITY_WEIGHTS[r["severity"]] * r["confidence"] for r in reactions)
    average = total / len(reactions)

    if average >= 3.5:
        return "critical"
    if average >= 2.5:
        return "severe"
    if average >= 1.5:
        return "moderate"
    return "mild"
