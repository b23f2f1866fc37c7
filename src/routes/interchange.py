from typing import List, Optional, Sequence
from src.network.graph import NetworkGraph
from src.routes.schemas import LineChange

def _shared_lines(graph: NetworkGraph, first: str, second: str) -> List[str]:
    """Lines serving both stations, in the first station's line order"""
    second_lines = graph.get_lines(second)
    return [line for line in graph.get_lines(first) if line in second_lines]

def is_line_change(graph: NetworkGraph, prev: str, curr: str, nxt: str) -> bool:
    """Check if the traveller must change lines at `curr` between `prev` and `nxt`"""
    lines_in = _shared_lines(graph, prev, curr)
    lines_out = _shared_lines(graph, curr, nxt)
    
    if not lines_in or not lines_out:
        return True
    return not any(line in lines_out for line in lines_in)

def is_interchange_point(graph: NetworkGraph, prev: str, curr: str, nxt: str) -> bool:
    """An interchange station where the active line actually changes"""
    return graph.is_interchange_station(curr) and is_line_change(graph, prev, curr, nxt)

def find_interchanges(graph: NetworkGraph, path: Sequence[str]) -> List[str]:
    """Interior stations of the path where the traveller changes lines"""
    return [
        path[i]
        for i in range(1, len(path) - 1)
        if is_interchange_point(graph, path[i - 1], path[i], path[i + 1])
    ]

def _line_change_at(graph: NetworkGraph, prev: str, curr: str, nxt: str) -> Optional[LineChange]:
    lines_in = _shared_lines(graph, prev, curr)
    lines_out = _shared_lines(graph, nxt, curr)
    
    if not lines_in or not lines_out:
        return None
    from_line, to_line = lines_in[0], lines_out[0]
    if from_line == to_line:
        return None
    return LineChange(from_line=from_line, to_line=to_line, at=curr)

def get_line_changes(graph: NetworkGraph, path: Sequence[str]) -> List[LineChange]:
    """Detailed (from line, to line, station) records for each interchange on the path"""
    line_changes = []
    
    for i in range(1, len(path) - 1):
        prev, curr, nxt = path[i - 1], path[i], path[i + 1]
        if not is_interchange_point(graph, prev, curr, nxt):
            continue
        
        change = _line_change_at(graph, prev, curr, nxt)
        if change:
            line_changes.append(change)
    
    return line_changes
