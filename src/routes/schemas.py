from pydantic import BaseModel, Field
from typing import List, Dict, Literal, Optional

Algorithm = Literal["bfs", "dijkstra", "astar"]

class RouteRequest(BaseModel):
    """Request schema for route finding"""
    source: str
    destination: str
    algorithm: Optional[Algorithm] = None  # Falls back to the configured default

class LineChange(BaseModel):
    """A switch from one line to another at an interchange station"""
    from_line: str = Field(alias="from")
    to_line: str = Field(alias="to")
    at: str
    
    class Config:
        populate_by_name = True

class FareBreakdown(BaseModel):
    """Detailed fare breakdown"""
    base: int
    additional: int
    interchange_penalty: int
    total: int

class RouteResult(BaseModel):
    """Complete route between two stations"""
    path: List[str]
    interchanges: List[str]
    line_changes: List[LineChange]
    fare: FareBreakdown
    time_minutes: int
    total_stations: int
    distance: float  # Hops for BFS, summed edge weight otherwise
    total_distance_km: float
    algorithm: Algorithm

class RouteResponse(BaseModel):
    """Response schema for route finding"""
    request: RouteRequest
    route: RouteResult
    calculation_time_ms: int

class AlgorithmInfo(BaseModel):
    """Available path search strategies"""
    available: List[str]
    default: str
    description: Dict[str, str]
