from decimal import Decimal, ROUND_HALF_UP
from typing import Optional
from src.config import Settings, settings as default_settings
from src.routes.schemas import FareBreakdown

class FareCalculationService:
    """Fare, travel time and distance estimates derived from a route's shape"""
    
    def __init__(self, config: Optional[Settings] = None):
        config = config or default_settings
        self.base_fare = config.BASE_FARE
        self.free_stations = config.FREE_STATIONS
        self.per_station_fare = config.PER_STATION_FARE
        self.interchange_penalty = config.INTERCHANGE_PENALTY
        self.minutes_per_hop = config.MINUTES_PER_HOP
        self.minutes_per_interchange = config.MINUTES_PER_INTERCHANGE
        self.km_per_hop = config.KM_PER_HOP
    
    def calculate_fare(self, total_stations: int, interchange_count: int) -> FareBreakdown:
        """Base fare covers the first stations, then a per-station and per-interchange charge"""
        if total_stations <= 1:
            return FareBreakdown(base=0, additional=0, interchange_penalty=0, total=0)
        
        base = self.base_fare
        additional = max(0, total_stations - self.free_stations) * self.per_station_fare
        penalty = max(0, interchange_count) * self.interchange_penalty
        
        return FareBreakdown(
            base=base,
            additional=additional,
            interchange_penalty=penalty,
            total=base + additional + penalty
        )
    
    def calculate_travel_time(self, total_stations: int, interchange_count: int) -> int:
        """Estimated minutes, rounded half-up to a whole minute"""
        if total_stations <= 1:
            return 0
        
        minutes = (
            Decimal(str(self.minutes_per_hop)) * (total_stations - 1) +
            Decimal(str(self.minutes_per_interchange)) * max(0, interchange_count)
        )
        return int(minutes.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    
    def calculate_distance_km(self, total_stations: int) -> float:
        """Approximate track distance using the average inter-station spacing"""
        if total_stations <= 1:
            return 0.0
        return round((total_stations - 1) * self.km_per_hop, 2)
