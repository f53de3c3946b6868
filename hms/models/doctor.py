from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Boolean, Text, Float, JSON
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from ..core.database import Base, generate_id

DEFAULT_AVAILABILITY = {
    "days": ["Mon", "Tue", "Wed", "Thu", "Fri"],
    "start_time": "09:00",
    "end_time": "17:00",
}

class Doctor(Base):
    """Profile of a registered doctor. Seed doctors are not stored here."""
    __tablename__ = "doctors"

    id = Column(String(24), primary_key=True, default=generate_id)
    user_id = Column(String(24), ForeignKey("users.id"), unique=True, nullable=False)

    # Professional information
    specialization = Column(String(100), nullable=False)
    experience = Column(Integer, default=0)
    qualifications = Column(String(255), default="")
    license_number = Column(String(50), default="")
    about = Column(Text, default="")
    image_url = Column(String(255), default="")

    # Availability
    availability = Column(JSON, default=lambda: dict(DEFAULT_AVAILABILITY))
    is_available = Column(Boolean, default=True)
    consultation_fee = Column(Integer, default=0)
    rating = Column(Float, default=4.5)

    education = Column(JSON, default=list)
    awards = Column(JSON, default=list)
    languages = Column(JSON, default=list)

    # Timestamps
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # Relationships
    user = relationship("User", back_populates="doctor")

    def __repr__(self):
        return f"<Doctor(id={self.id}, user_id={self.user_id}, specialization='{self.specialization}')>"
