from sqlalchemy import Column, String, ForeignKey, DateTime, Date, Text
from sqlalchemy.sql import func

from ..core.database import Base, generate_id

class Medication(Base):
    __tablename__ = "medications"

    id = Column(String(24), primary_key=True, default=generate_id)
    user_id = Column(String(24), ForeignKey("users.id"), nullable=False, index=True)

    name = Column(String(200), nullable=False)
    dosage = Column(String(100), nullable=False)
    frequency = Column(String(100), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)
    instructions = Column(Text, nullable=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Medication(id={self.id}, user_id={self.user_id}, name='{self.name}')>"
