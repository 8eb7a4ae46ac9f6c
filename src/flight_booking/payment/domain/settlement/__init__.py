from .settlement import InstantSettlement, Settlement

__all__ = ["InstantSettlement", "Settlement"]
