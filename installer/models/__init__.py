from .setup import SetupState
from .state import StateEntry

__all__ = ["SetupState", "StateEntry"]
