from .frame import Frame
from .runner import GameRunner

__all__ = [
    "Frame",
    "GameRunner",
]
