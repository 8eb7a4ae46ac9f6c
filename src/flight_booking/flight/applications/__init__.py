from .search_flights import FlightSearchService

__all__ = ["FlightSearchService"]
