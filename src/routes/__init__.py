"""
Route Planning Module

This module provides route finding for the metro network. It includes:

- Path search using BFS (fewest stations), Dijkstra and A*
- Interchange and line-change detection along a path
- Fare calculation (base fare, per-station charge, interchange penalty)
- Travel time and distance estimates

Key Components:
- search.py: Path search strategies over the network graph
- interchange.py: Line-change analysis for a computed path
- fare_service.py: Fare, time and distance estimates
- service.py: RouteService combining search, analysis and fares
- router.py: FastAPI endpoints for route finding
- schemas.py: Pydantic models for request/response structures
"""

from .router import router
from .service import RouteService, find_route, list_algorithms
from .fare_service import FareCalculationService
from .search import (
    SearchResult, bfs_shortest_path, dijkstra_shortest_path, astar_shortest_path,
    default_heuristic, get_search_strategy
)
from .interchange import is_line_change, find_interchanges, get_line_changes
from .schemas import (
    RouteRequest, RouteResponse, RouteResult, LineChange, FareBreakdown, AlgorithmInfo
)

__all__ = [
    "router",
    "RouteService",
    "find_route",
    "list_algorithms",
    "FareCalculationService",
    "SearchResult",
    "bfs_shortest_path",
    "dijkstra_shortest_path",
    "astar_shortest_path",
    "default_heuristic",
    "get_search_strategy",
    "is_line_change",
    "find_interchanges",
    "get_line_changes",
    "RouteRequest",
    "RouteResponse",
    "RouteResult",
    "LineChange",
    "FareBreakdown",
    "AlgorithmInfo"
]
