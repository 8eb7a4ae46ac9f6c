from .flight_inventory import FlightInventory

__all__ = ["FlightInventory"]
