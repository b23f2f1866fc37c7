import logging
from collections import defaultdict
from typing import Dict, Iterable, Iterator, List, Optional, Set

from src.exceptions import InvalidGraphInputException
from src.network.schemas import NetworkEdge, NetworkNode, StationRecord

logger = logging.getLogger(__name__)


class NetworkGraph:
    """Graph representation of the metro network for route planning"""
    
    def __init__(self):
        self.nodes: Dict[str, NetworkNode] = {}
        
    def add_node(self, name: str, line: str, is_interchange: bool = False) -> NetworkNode:
        """Add a station node, or register another line serving an existing one"""
        node = self.nodes.get(name)
        if node is None:
            node = NetworkNode(name=name)
            self.nodes[name] = node
        
        if line not in node.lines:
            node.lines.append(line)
        
        # Explicit upstream flag and multi-line membership both count
        node.is_interchange = node.is_interchange or is_interchange or len(node.lines) > 1
        return node
    
    def add_edge(self, from_station: str, to_station: str, line: str, weight: float = 1):
        """Add a same-line connection in both directions"""
        for station in (from_station, to_station):
            if station not in self.nodes:
                raise InvalidGraphInputException(
                    f"Edge on line '{line}' references undeclared station '{station}'"
                )
        
        self.nodes[from_station].edges.append(
            NetworkEdge(from_station=from_station, to_station=to_station, line=line, weight=weight)
        )
        self.nodes[to_station].edges.append(
            NetworkEdge(from_station=to_station, to_station=from_station, line=line, weight=weight)
        )
    
    def get_neighbors(self, station: str) -> List[NetworkEdge]:
        """Get all direct connections from a station"""
        node = self.nodes.get(station)
        return node.edges if node else []
    
    def get_lines(self, station: str) -> List[str]:
        node = self.nodes.get(station)
        return node.lines if node else []
    
    def is_interchange_station(self, station: str) -> bool:
        node = self.nodes.get(station)
        return bool(node and node.is_interchange)
    
    def edge_count(self) -> int:
        return sum(len(node.edges) for node in self.nodes.values())
    
    def __contains__(self, station: object) -> bool:
        return station in self.nodes
    
    def __iter__(self) -> Iterator[str]:
        return iter(self.nodes)
    
    def __len__(self) -> int:
        return len(self.nodes)


def build_network_graph(records: Iterable[StationRecord]) -> NetworkGraph:
    """
    Build the network graph from flat (station, line, position) records.
    
    Stations are ordered by position within each line and every adjacent
    pair is joined in both directions with a weight of one hop. A line with
    a single station contributes a node but no edges.
    """
    graph = NetworkGraph()
    lines: Dict[int, List[StationRecord]] = defaultdict(list)
    
    for record in records:
        lines[record.line_id].append(record)
    
    for line_id, line_records in lines.items():
        line_records.sort(key=lambda r: r.position)
        
        seen_positions: Set[int] = set()
        seen_names: Set[str] = set()
        previous: Optional[StationRecord] = None
        
        for record in line_records:
            if record.position in seen_positions:
                raise InvalidGraphInputException(
                    f"Position {record.position} is used twice on line '{record.line_name}'"
                )
            if record.station_name in seen_names:
                raise InvalidGraphInputException(
                    f"Station '{record.station_name}' appears twice on line '{record.line_name}'"
                )
            seen_positions.add(record.position)
            seen_names.add(record.station_name)
            
            graph.add_node(record.station_name, record.line_name, record.is_interchange)
            if previous is not None:
                graph.add_edge(previous.station_name, record.station_name, record.line_name)
            previous = record
    
    logger.debug(
        "Built network graph: %d lines, %d stations, %d edges",
        len(lines), len(graph), graph.edge_count()
    )
    return graph
