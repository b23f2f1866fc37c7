import logging
from typing import Optional

from src.config import settings
from src.exceptions import StationNotFoundException, RouteNotFoundException
from src.network.graph import NetworkGraph
from src.routes.fare_service import FareCalculationService
from src.routes.interchange import find_interchanges, get_line_changes
from src.routes.schemas import AlgorithmInfo, RouteResult
from src.routes.search import Heuristic, SEARCH_STRATEGIES, get_search_strategy

logger = logging.getLogger(__name__)

ALGORITHM_DESCRIPTIONS = {
    "bfs": "Breadth-First Search - finds the path with the fewest stations",
    "dijkstra": "Dijkstra's algorithm - finds the shortest path over weighted connections",
    "astar": "A* algorithm - heuristic-guided search, optimal only with an admissible heuristic",
}


class RouteService:
    """Route finding over one network graph snapshot"""
    
    def __init__(self, graph: NetworkGraph, fare_service: Optional[FareCalculationService] = None):
        self.graph = graph
        self.fare_service = fare_service or FareCalculationService()
    
    def find_route(
        self,
        source: str,
        destination: str,
        algorithm: Optional[str] = None,
        heuristic: Optional[Heuristic] = None
    ) -> RouteResult:
        """Find a route and derive its interchanges, line changes, fare and travel time"""
        algorithm = (algorithm or settings.DEFAULT_ALGORITHM).lower()
        strategy = get_search_strategy(algorithm)
        
        if source not in self.graph:
            logger.warning("Source station not found: %s", source)
            raise StationNotFoundException(source, side="source")
        if destination not in self.graph:
            logger.warning("Destination station not found: %s", destination)
            raise StationNotFoundException(destination, side="destination")
        
        if algorithm == "astar":
            result = strategy(self.graph, source, destination, heuristic)
        else:
            result = strategy(self.graph, source, destination)
        
        if result is None:
            logger.warning("No route between %s and %s (%s)", source, destination, algorithm)
            raise RouteNotFoundException(source, destination)
        
        interchanges = result.interchanges
        if interchanges is None:
            interchanges = find_interchanges(self.graph, result.path)
        
        total_stations = len(result.path)
        route = RouteResult(
            path=result.path,
            interchanges=interchanges,
            line_changes=get_line_changes(self.graph, result.path),
            fare=self.fare_service.calculate_fare(total_stations, len(interchanges)),
            time_minutes=self.fare_service.calculate_travel_time(total_stations, len(interchanges)),
            total_stations=total_stations,
            distance=result.distance,
            total_distance_km=self.fare_service.calculate_distance_km(total_stations),
            algorithm=algorithm
        )
        
        logger.info(
            "Route %s -> %s via %s: %d stations, %d interchanges",
            source, destination, algorithm, total_stations, len(interchanges)
        )
        return route


def find_route(
    graph: NetworkGraph,
    source: str,
    destination: str,
    algorithm: Optional[str] = None,
    heuristic: Optional[Heuristic] = None
) -> RouteResult:
    """Convenience wrapper for one-off route requests"""
    return RouteService(graph).find_route(source, destination, algorithm, heuristic)


def list_algorithms() -> AlgorithmInfo:
    return AlgorithmInfo(
        available=list(SEARCH_STRATEGIES),
        default=settings.DEFAULT_ALGORITHM,
        description=ALGORITHM_DESCRIPTIONS
    )
