# core/color.py
from typing import Tuple

class Color:
    """
    An RGB surface color with channels nominally in [0, 1].
    Channels are plain Python floats (double precision).
    """
    def __init__(self, red: float, green: float, blue: float):
        self.red = red
        self.green = green
        self.blue = blue

    def to_rgba(self) -> Tuple[int, int, int, int]:
        """
        Converts to 8 bits per channel, clamping out-of-range channels.
        Colors are always opaque.
        """
        return (_to_u8(self.red), _to_u8(self.green), _to_u8(self.blue), 255)

    def __repr__(self) -> str:
        return f"Color({self.red}, {self.green}, {self.blue})"

def _to_u8(channel: float) -> int:
    return int(round(min(max(channel, 0.0), 1.0) * 255))
