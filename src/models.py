from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from src.database import Base

# ================================
# Metro Network
# ================================
class TrainLine(Base):
    __tablename__ = "train_lines"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, unique=True)
    color = Column(String(20))
    route = Column(String(255))  # e.g. "Miyapur <-> LB Nagar"
    status = Column(String(50), default="active")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    
    # Relationships
    stations = relationship("Station", back_populates="line", order_by="Station.position")

class Station(Base):
    """One row per (station, line) membership; interchanges share a name across lines"""
    __tablename__ = "stations"
    __table_args__ = (
        UniqueConstraint("line_id", "position", name="uq_station_line_position"),
    )
    
    id = Column(Integer, primary_key=True, index=True)
    line_id = Column(Integer, ForeignKey("train_lines.id"), nullable=False)
    name = Column(String(255), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    is_interchange = Column(Boolean, default=False, index=True)
    status = Column(String(50), default="active")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    
    # Relationships
    line = relationship("TrainLine", back_populates="stations")
