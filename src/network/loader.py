from typing import List
from sqlalchemy.orm import Session
from src.models import Station, TrainLine
from src.network.schemas import StationRecord
from src.network.graph import NetworkGraph, build_network_graph

def load_station_records(db: Session) -> List[StationRecord]:
    """Load every active station membership, grouped by line and ordered by position"""
    rows = db.query(Station, TrainLine).join(
        TrainLine, Station.line_id == TrainLine.id
    ).filter(
        Station.status == "active",
        TrainLine.status == "active"
    ).order_by(TrainLine.id, Station.position).all()
    
    return [
        StationRecord(
            station_name=station.name,
            line_id=line.id,
            line_name=line.name,
            position=station.position,
            is_interchange=bool(station.is_interchange)
        )
        for station, line in rows
    ]

def load_network_graph(db: Session) -> NetworkGraph:
    """Build a fresh network graph snapshot from the database"""
    return build_network_graph(load_station_records(db))
