"""
Data models for mines, peak intervals and reports

- Mine: position, explosive power and neighbor handles into the field
- Interval: a time step of a chain reaction and its explosion count
- WinnerReport: serializable summary of a winning mine
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np
from pydantic import BaseModel


@dataclass
class Interval:
    """Time step of a chain reaction and how many mines exploded in it"""
    time: int  # 0 = the trigger mine's own step
    explosions: int


@dataclass
class Mine:
    """
    Mine on the field.

    Coordinates and power are single precision. `neighbors` holds indices
    into the owning field's mine list: every mine within this mine's power.
    """
    id: int
    x: np.float32
    y: np.float32
    power: np.float32
    neighbors: List[int] = field(default_factory=list)
    peak: Optional[Interval] = None

    def __post_init__(self):
        self.x = np.float32(self.x)
        self.y = np.float32(self.y)
        self.power = np.float32(self.power)

    def position(self) -> Tuple[np.float32, np.float32]:
        return (self.x, self.y)


class WinnerReport(BaseModel):
    """One line of the winners table"""
    rank: int
    id: int
    x: float
    y: float
    peak_time: int
    peak_explosions: int

    @classmethod
    def from_mine(cls, rank: int, mine: Mine) -> 'WinnerReport':
        if mine.peak is None:
            raise ValueError(f"mine ID={mine.id} has no peak interval")
        return cls(
            rank=rank,
            id=mine.id,
            x=float(mine.x),
            y=float(mine.y),
            peak_time=mine.peak.time,
            peak_explosions=mine.peak.explosions
        )

    def to_line(self) -> str:
        return (
            f"Winner ({self.rank}): Mine ID={self.id}, X={self.x:f}, Y={self.y:f}, "
            f"Peak Time={self.peak_time}, Peak Explosions={self.peak_explosions}"
        )
