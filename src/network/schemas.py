from pydantic import BaseModel, Field
from typing import List

class StationRecord(BaseModel):
    """One station's membership of a line, as supplied by the data layer"""
    station_name: str
    line_id: int
    line_name: str
    position: int
    is_interchange: bool = False

class NetworkEdge(BaseModel):
    """Directed connection between two adjacent stations on a line"""
    from_station: str
    to_station: str
    line: str
    weight: float = 1  # One hop; may carry physical distance instead

class NetworkNode(BaseModel):
    """Network graph node representation"""
    name: str
    lines: List[str] = Field(default_factory=list)  # Ordered, no duplicates
    is_interchange: bool = False
    edges: List[NetworkEdge] = Field(default_factory=list)
