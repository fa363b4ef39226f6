"""Exception types raised by the engine. All of them are recoverable by callers."""


class TzPulseError(Exception):
    """Base class for engine errors."""


class UnknownRegion(TzPulseError, KeyError):
    """Identifier is not in the catalog or the timezone database."""

    def __init__(self, region_id: str, detail: str = "") -> None:
        self.region_id = region_id
        message = f"Unknown region: {region_id}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class InvalidCoordinate(TzPulseError, ValueError):
    """Latitude/longitude outside [-90, 90] x [-180, 180] or not finite."""

    def __init__(self, lat: float, lng: float) -> None:
        self.lat = lat
        self.lng = lng
        super().__init__(f"Invalid coordinate: lat={lat}, lng={lng}")


class DegenerateBoundary(TzPulseError, ValueError):
    """Boundary polygon with fewer than 3 vertices."""
