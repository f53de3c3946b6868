"""Doctors that ship with the application.

These records are static data: they are never written to the database and
cannot be edited. Appointments reference them by their fixed ``id``.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

@dataclass(frozen=True)
class SeedDoctor:
    id: str
    name: str
    email: str
    specialization: str
    experience: int
    qualifications: str
    license_number: str
    availability: Dict[str, object]
    about: str
    image_url: str
    consultation_fee: int
    rating: float
    education: List[Dict[str, object]] = field(default_factory=list)
    awards: List[str] = field(default_factory=list)
    languages: List[str] = field(default_factory=list)
    is_available: bool = True

def _availability(days, start, end):
    return {"days": days, "start_time": start, "end_time": end}

SEED_DOCTORS = [
    SeedDoctor(
        id="6501234567891011121314a1",
        name="Dr. Sarah Johnson",
        email="sarah.johnson@example.com",
        specialization="Cardiology",
        experience=12,
        qualifications="MD, FACC",
        license_number="CAR12345",
        availability=_availability(["Mon", "Tue", "Wed", "Fri"], "09:00", "17:00"),
        about="Specialized in cardiovascular diseases with over 12 years of clinical experience.",
        image_url="https://randomuser.me/api/portraits/women/25.jpg",
        consultation_fee=1500,
        rating=4.8,
        education=[
            {"degree": "MD in Cardiology", "institution": "Stanford Medical School", "year": 2011},
            {"degree": "Bachelor of Medicine", "institution": "Johns Hopkins University", "year": 2005},
        ],
        awards=["Excellence in Cardiovascular Research, 2018", "Young Physician Award, 2015"],
        languages=["English", "Spanish"],
    ),
    SeedDoctor(
        id="6501234567891011121314a2",
        name="Dr. Michael Chen",
        email="michael.chen@example.com",
        specialization="Neurology",
        experience=10,
        qualifications="MD, PhD",
        license_number="NEU54321",
        availability=_availability(["Mon", "Wed", "Thu", "Fri"], "08:30", "16:30"),
        about="Board-certified neurologist specializing in headache disorders and stroke treatment.",
        image_url="https://randomuser.me/api/portraits/men/32.jpg",
        consultation_fee=1800,
        rating=4.7,
        education=[
            {"degree": "PhD in Neuroscience", "institution": "Harvard Medical School", "year": 2013},
            {"degree": "MD in Neurology", "institution": "Columbia University", "year": 2009},
        ],
        awards=["Neurological Research Award, 2019", "Innovative Treatment Approach, 2017"],
        languages=["English", "Mandarin", "Cantonese"],
    ),
    SeedDoctor(
        id="6501234567891011121314a3",
        name="Dr. Emily Rodriguez",
        email="emily.rodriguez@example.com",
        specialization="Pediatrics",
        experience=8,
        qualifications="MD, FAAP",
        license_number="PED98765",
        availability=_availability(["Tue", "Wed", "Thu", "Fri"], "09:00", "18:00"),
        about="Passionate about child health, specializing in early childhood development and preventive care.",
        image_url="https://randomuser.me/api/portraits/women/43.jpg",
        consultation_fee=1200,
        rating=4.9,
        education=[
            {"degree": "MD in Pediatrics", "institution": "Yale School of Medicine", "year": 2012},
            {"degree": "Bachelor of Science", "institution": "UCLA", "year": 2006},
        ],
        awards=["Children's Health Foundation Award, 2020", "Pediatric Care Excellence, 2018"],
        languages=["English", "Spanish", "Portuguese"],
    ),
    SeedDoctor(
        id="6501234567891011121314a4",
        name="Dr. James Wilson",
        email="james.wilson@example.com",
        specialization="Orthopedics",
        experience=15,
        qualifications="MD, FAAOS",
        license_number="ORT67890",
        availability=_availability(["Mon", "Tue", "Thu"], "10:00", "18:00"),
        about="Specializes in sports medicine and joint reconstruction with minimal invasive techniques.",
        image_url="https://randomuser.me/api/portraits/men/55.jpg",
        consultation_fee=2000,
        rating=4.6,
        education=[
            {"degree": "Fellowship in Sports Medicine", "institution": "Mayo Clinic", "year": 2009},
            {"degree": "MD in Orthopedic Surgery", "institution": "University of Pennsylvania", "year": 2005},
        ],
        awards=["Sports Medicine Innovation Award, 2017", "Excellence in Joint Replacement, 2014"],
        languages=["English"],
        is_available=False,
    ),
    SeedDoctor(
        id="6501234567891011121314a5",
        name="Dr. Amara Patel",
        email="amara.patel@example.com",
        specialization="General Medicine",
        experience=7,
        qualifications="MD",
        license_number="GEN24680",
        availability=_availability(["Mon", "Tue", "Wed", "Thu", "Fri"], "09:00", "17:00"),
        about="Holistic approach to health focusing on preventive care and comprehensive management of chronic diseases.",
        image_url="https://randomuser.me/api/portraits/women/63.jpg",
        consultation_fee=1000,
        rating=4.5,
        education=[
            {"degree": "MD in Internal Medicine", "institution": "Northwestern University", "year": 2014},
            {"degree": "Bachelor of Medicine", "institution": "University of Chicago", "year": 2008},
        ],
        awards=["Preventive Care Excellence, 2019"],
        languages=["English", "Hindi", "Gujarati"],
    ),
    SeedDoctor(
        id="6501234567891011121314a6",
        name="Dr. Rajesh Sharma",
        email="rajesh.sharma@example.com",
        specialization="Ayurvedic Medicine",
        experience=18,
        qualifications="BAMS, MD (Ayurveda)",
        license_number="AYU28795",
        availability=_availability(["Mon", "Tue", "Wed", "Thu", "Sat"], "10:00", "19:00"),
        about=(
            "Internationally recognized Ayurvedic physician with expertise in chronic disease "
            "management through traditional approaches combined with modern healthcare practices."
        ),
        image_url="",
        consultation_fee=1200,
        rating=4.9,
        education=[
            {"degree": "MD in Ayurvedic Medicine", "institution": "All India Institute of Ayurveda, New Delhi", "year": 2005},
            {"degree": "Bachelor of Ayurvedic Medicine & Surgery (BAMS)", "institution": "Banaras Hindu University", "year": 2000},
        ],
        awards=[
            "National Ayurveda Excellence Award, 2019",
            "Best Ayurvedic Practitioner, Ministry of AYUSH, 2016",
            "Research Excellence in Traditional Medicine, 2012",
        ],
        languages=["English", "Hindi", "Sanskrit", "Bengali"],
    ),
    SeedDoctor(
        id="6501234567891011121314a7",
        name="Dr. Priya Agarwal",
        email="priya.agarwal@example.com",
        specialization="Obstetrics & Gynecology",
        experience=14,
        qualifications="MBBS, MS (Obs & Gyn), DNB",
        license_number="OBGY76543",
        availability=_availability(["Mon", "Wed", "Thu", "Fri", "Sat"], "09:30", "18:00"),
        about="Specialized in high-risk pregnancies and women's reproductive health with a compassionate approach to patient care.",
        image_url="",
        consultation_fee=1500,
        rating=4.8,
        education=[
            {"degree": "Diplomate of National Board (DNB)", "institution": "National Board of Examinations, New Delhi", "year": 2012},
            {"degree": "MS in Obstetrics & Gynecology", "institution": "All India Institute of Medical Sciences (AIIMS)", "year": 2009},
            {"degree": "MBBS", "institution": "Christian Medical College, Vellore", "year": 2005},
        ],
        awards=[
            "Dr. B.C. Roy Award for Excellence in Medicine, 2021",
            "Distinguished Gynecologist Award, FOGSI, 2018",
            "Young Scientist Award in Women's Health Research, 2015",
        ],
        languages=["English", "Hindi", "Tamil", "Telugu"],
    ),
]

_BY_ID = {doctor.id: doctor for doctor in SEED_DOCTORS}
_BY_EMAIL = {doctor.email.lower(): doctor for doctor in SEED_DOCTORS}

def get_seed_doctor(doctor_id: str) -> Optional[SeedDoctor]:
    return _BY_ID.get(doctor_id)

def get_seed_doctor_by_email(email: str) -> Optional[SeedDoctor]:
    return _BY_EMAIL.get((email or "").lower())

def all_seed_doctors() -> List[SeedDoctor]:
    return list(SEED_DOCTORS)
