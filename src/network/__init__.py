"""
Network Graph Module

In-memory model of the metro network used by route planning. It includes:

- Station nodes with the lines serving them and interchange flags
- Symmetric same-line adjacency edges (one hop each)
- Graph construction from flat (station, line, position) records
- Loading those records from the database

Key Components:
- graph.py: NetworkGraph and build_network_graph
- loader.py: SQLAlchemy adapter producing station records
- schemas.py: Pydantic models for records, nodes and edges
"""

from .graph import NetworkGraph, build_network_graph
from .loader import load_station_records, load_network_graph
from .schemas import StationRecord, NetworkNode, NetworkEdge

__all__ = [
    "NetworkGraph",
    "build_network_graph",
    "load_station_records",
    "load_network_graph",
    "StationRecord",
    "NetworkNode",
    "NetworkEdge"
]
