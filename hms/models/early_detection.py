from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Text, JSON
from sqlalchemy.sql import func

from ..core.database import Base, generate_id

class EarlyDetection(Base):
    __tablename__ = "early_detections"

    id = Column(String(24), primary_key=True, default=generate_id)
    user_id = Column(String(24), ForeignKey("users.id"), nullable=False, index=True)

    # Inputs
    symptoms = Column(JSON, nullable=False, default=list)
    severity = Column(String(20), nullable=False)
    age = Column(Integer, nullable=False)
    gender = Column(String(20), nullable=False)
    medical_history = Column(JSON, default=list)
    family_history = Column(JSON, default=list)
    lifestyle = Column(Text, nullable=True)

    # Results
    status = Column(String(20), default="pending", nullable=False)
    emergency_rating = Column(Integer, nullable=True)
    risk_level = Column(String(10), nullable=True, index=True)
    potential_conditions = Column(JSON, default=list)
    recommendations = Column(JSON, default=list)
    estimated_duration = Column(Integer, nullable=True)

    created_at = Column(DateTime, server_default=func.now(), index=True)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<EarlyDetection(id={self.id}, user_id={self.user_id}, risk_level='{self.risk_level}')>"
