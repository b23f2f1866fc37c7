"""
Path search strategies over the metro network graph.

Every strategy shares the signature ``strategy(graph, source, destination)``
and returns a :class:`SearchResult`, or ``None`` when either station is
missing from the graph or the destination cannot be reached. All
bookkeeping (visited sets, distance maps, queues) is local to one call, so a
single graph can be searched from many requests at once.
"""

import heapq
import itertools
from collections import deque
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Set, Tuple

from src.network.graph import NetworkGraph
from src.routes.interchange import is_interchange_point

Heuristic = Callable[[str, str], float]


@dataclass
class SearchResult:
    path: List[str]
    distance: float
    # Filled only by strategies that track interchanges while searching
    interchanges: Optional[List[str]] = None


def default_heuristic(station: str, destination: str) -> float:
    """Name-length difference; cheap and domain-agnostic, not admissible in general"""
    return abs(len(station) - len(destination))


def bfs_shortest_path(graph: NetworkGraph, source: str, destination: str) -> Optional[SearchResult]:
    """
    Breadth-first search for the path with the fewest hops.
    
    A station is closed the first time it is dequeued. Interchanges are
    recorded while the path is extended: the current station counts when it
    is an interchange and the step to the neighbour changes line.
    """
    if source not in graph or destination not in graph:
        return None
    if source == destination:
        return SearchResult(path=[source], distance=0, interchanges=[])
    
    queue = deque([(source, [source], [])])
    visited: Set[str] = set()
    
    while queue:
        station, path, interchanges = queue.popleft()
        
        if station == destination:
            return SearchResult(path=path, distance=len(path) - 1, interchanges=interchanges)
        
        if station in visited:
            continue
        visited.add(station)
        
        for edge in graph.get_neighbors(station):
            neighbor = edge.to_station
            if neighbor in visited:
                continue
            
            new_interchanges = interchanges
            if len(path) > 1 and is_interchange_point(graph, path[-2], station, neighbor):
                new_interchanges = interchanges + [station]
            
            queue.append((neighbor, path + [neighbor], new_interchanges))
    
    return None


def _reconstruct_path(previous: Dict[str, Optional[str]], source: str, destination: str) -> Optional[List[str]]:
    path = []
    current: Optional[str] = destination
    
    while current is not None:
        path.append(current)
        current = previous.get(current)
    
    path.reverse()
    if path[0] != source:
        return None
    return path


def dijkstra_shortest_path(graph: NetworkGraph, source: str, destination: str) -> Optional[SearchResult]:
    """Dijkstra's algorithm over edge weights (one per hop unless the edge says otherwise)"""
    if source not in graph or destination not in graph:
        return None
    if source == destination:
        return SearchResult(path=[source], distance=0, interchanges=[])
    
    distances: Dict[str, float] = {station: float("inf") for station in graph}
    distances[source] = 0
    previous: Dict[str, Optional[str]] = {source: None}
    visited: Set[str] = set()
    
    # (distance, insertion order, station); the counter breaks ties deterministically
    counter = itertools.count()
    pq: List[Tuple[float, int, str]] = [(0, next(counter), source)]
    
    while pq:
        current_distance, _, station = heapq.heappop(pq)
        
        if station in visited:
            continue
        visited.add(station)
        
        if station == destination:
            break
        
        for edge in graph.get_neighbors(station):
            neighbor = edge.to_station
            if neighbor in visited:
                continue
            
            new_distance = current_distance + edge.weight
            if new_distance < distances[neighbor]:
                distances[neighbor] = new_distance
                previous[neighbor] = station
                heapq.heappush(pq, (new_distance, next(counter), neighbor))
    
    if destination not in previous:
        return None
    
    path = _reconstruct_path(previous, source, destination)
    if path is None:
        return None
    return SearchResult(path=path, distance=distances[destination])


def astar_shortest_path(
    graph: NetworkGraph,
    source: str,
    destination: str,
    heuristic: Optional[Heuristic] = None
) -> Optional[SearchResult]:
    """
    A* search ordered by f = g + h.
    
    The heuristic is trusted as given; an inadmissible one may yield a
    longer path than Dijkstra would.
    """
    if source not in graph or destination not in graph:
        return None
    if source == destination:
        return SearchResult(path=[source], distance=0, interchanges=[])
    
    h = heuristic or default_heuristic
    g_score: Dict[str, float] = {source: 0}
    closed: Set[str] = set()
    
    counter = itertools.count()
    open_set: List[Tuple[float, int, str, float, List[str]]] = [
        (h(source, destination), next(counter), source, 0, [source])
    ]
    
    while open_set:
        _, _, station, g, path = heapq.heappop(open_set)
        
        # Stale entry superseded by a cheaper one
        if station in closed or g > g_score.get(station, float("inf")):
            continue
        
        if station == destination:
            return SearchResult(path=path, distance=g)
        
        closed.add(station)
        
        for edge in graph.get_neighbors(station):
            neighbor = edge.to_station
            if neighbor in closed:
                continue
            
            tentative_g = g + edge.weight
            if tentative_g < g_score.get(neighbor, float("inf")):
                g_score[neighbor] = tentative_g
                f = tentative_g + h(neighbor, destination)
                heapq.heappush(open_set, (f, next(counter), neighbor, tentative_g, path + [neighbor]))
    
    return None


SEARCH_STRATEGIES: Dict[str, Callable[..., Optional[SearchResult]]] = {
    "bfs": bfs_shortest_path,
    "dijkstra": dijkstra_shortest_path,
    "astar": astar_shortest_path,
}


def get_search_strategy(name: str) -> Callable[..., Optional[SearchResult]]:
    try:
        return SEARCH_STRATEGIES[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown route algorithm '{name}'. Available: {', '.join(SEARCH_STRATEGIES)}"
        ) from None
