from sqlalchemy import Column, String, ForeignKey, DateTime, Date, Text, JSON
from sqlalchemy.sql import func

from ..core.database import Base, generate_id

class ADRReport(Base):
    """Patient-submitted adverse drug reaction report."""
    __tablename__ = "adr_reports"

    id = Column(String(24), primary_key=True, default=generate_id)
    patient_id = Column(String(24), ForeignKey("users.id"), nullable=False, index=True)

    medication = Column(String(200), nullable=False)
    reaction = Column(Text, nullable=False)
    severity = Column(String(20), nullable=False)
    date = Column(Date, nullable=False)
    description = Column(Text, nullable=False)
    status = Column(String(20), default="pending", nullable=False)

    # Output of the keyword matcher at submission time
    detected_reactions = Column(JSON, default=list)
    computed_severity = Column(String(20), default="none")

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<ADRReport(id={self.id}, patient_id={self.patient_id}, medication='{self.medication}')>"
