from . import card_validator

__all__ = ["card_validator"]
