# Route planning exceptions


class RoutingException(Exception):
    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class StationNotFoundException(RoutingException):
    """Raised per missing side so callers can word the error for that side"""

    def __init__(self, station: str, side: str = "source"):
        self.station = station
        self.side = side
        label = "Source" if side == "source" else "Destination"
        super().__init__(
            f"{label} station '{station}' does not exist in the network",
            code="STATION_NOT_FOUND",
        )


class RouteNotFoundException(RoutingException):
    def __init__(self, source: str, destination: str):
        self.source = source
        self.destination = destination
        super().__init__(
            f"No route exists between '{source}' and '{destination}'",
            code="ROUTE_NOT_FOUND",
        )


class InvalidGraphInputException(RoutingException):
    def __init__(self, message: str = "Invalid network data"):
        super().__init__(message, code="INVALID_GRAPH_INPUT")
