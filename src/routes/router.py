from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
import logging
import time

from src.database import get_db
from src.exceptions import (
    StationNotFoundException, RouteNotFoundException, InvalidGraphInputException
)
from src.network.loader import load_network_graph
from src.routes.schemas import RouteRequest, RouteResponse, AlgorithmInfo
from src.routes.service import RouteService, list_algorithms

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/find", response_model=RouteResponse)
def find_route(
    request: RouteRequest,
    db: Session = Depends(get_db)
):
    """Find the optimal route between two stations"""
    
    start_time = time.time()
    
    try:
        # Fresh snapshot per request; search never mutates it
        graph = load_network_graph(db)
        route = RouteService(graph).find_route(
            request.source, request.destination, request.algorithm
        )
    except StationNotFoundException as e:
        error = "Source station not found" if e.side == "source" else "Destination station not found"
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": error, "message": e.message, "code": e.code, "field": e.side}
        )
    except RouteNotFoundException as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "No route found", "message": e.message, "code": e.code}
        )
    except InvalidGraphInputException as e:
        logger.error("Network data is inconsistent: %s", e.message)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "Invalid network data", "message": e.message, "code": e.code}
        )
    
    calculation_time = int((time.time() - start_time) * 1000)  # Convert to milliseconds
    
    return RouteResponse(
        request=request,
        route=route,
        calculation_time_ms=calculation_time
    )

@router.get("/algorithms", response_model=AlgorithmInfo)
def get_algorithms():
    """Get available pathfinding algorithms"""
    return list_algorithms()
