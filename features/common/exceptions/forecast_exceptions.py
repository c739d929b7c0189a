class ForecastError(Exception):
    """Base exception for surf forecast errors."""
    pass

class MissingWaveDataError(ForecastError):
    """Raised when a forecast is requested without any wave model data."""
    pass

class BuoyDataError(Exception):
    """Base exception for buoy observation errors."""
    pass

class BuoyParseError(BuoyDataError):
    """Raised when a raw buoy report cannot be parsed."""
    pass

class BuoyFetchError(BuoyDataError):
    """Raised when a buoy report cannot be downloaded."""
    pass
