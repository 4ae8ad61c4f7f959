"""
Minefield: mine arena with precomputed adjacency

Each mine lists (by index into the field) every other mine within its
explosive power. Adjacency is directional: A reaching B says nothing
about B reaching A.
"""
from typing import Dict, Iterable, Iterator, List, Optional, Tuple
import logging

import numpy as np

from minefield.errors import ValidationError, ValidationReason
from minefield.geometry import distance
from minefield.models import Mine

logger = logging.getLogger(__name__)


class Field:
    """
    Ordered collection of mines (insertion order = ID order).

    Mines are only ever appended. After loading, the structure is read-only
    and may be shared between concurrent simulations.
    """

    def __init__(self):
        self.mines: List[Mine] = []
        self._index_by_id: Dict[int, int] = {}
        self._coordinates: Dict[Tuple[np.float32, np.float32], int] = {}  # (x, y) -> mine ID

    @classmethod
    def from_mines(cls, mines: Iterable[Mine]) -> 'Field':
        """Build a field by adding mines in order (stops at the first invalid mine)"""
        field = cls()
        for mine in mines:
            field.add_mine(mine)
        return field

    def __len__(self) -> int:
        return len(self.mines)

    def __iter__(self) -> Iterator[Mine]:
        return iter(self.mines)

    def get(self, mine_id: int) -> Optional[Mine]:
        index = self._index_by_id.get(mine_id)
        if index is None:
            return None
        return self.mines[index]

    def index_of(self, mine: Mine) -> int:
        """
        Arena index of a mine that belongs to this field.

        Raises:
            ValueError: If the mine is not part of the field
        """
        index = self._index_by_id.get(mine.id)
        if index is None or self.mines[index] is not mine:
            raise ValueError(f"mine ID={mine.id} does not belong to this field")
        return index

    def neighbors_of(self, mine: Mine) -> List[Mine]:
        return [self.mines[i] for i in mine.neighbors]

    def add_mine(self, mine: Mine):
        """
        Add a mine and update adjacency in both directions.

        The mine is validated before anything is touched, so a rejected
        mine leaves the field unchanged.

        Raises:
            ValidationError: Negative power, duplicate ID or duplicate coordinates
        """
        self._validate(mine)

        index = len(self.mines)
        mine.neighbors = []
        for existing_index, existing in enumerate(self.mines):
            d = distance(mine, existing)

            # existing mine within the new mine's power
            if d <= mine.power:
                mine.neighbors.append(existing_index)

            # new mine within the existing mine's power
            if d <= existing.power:
                existing.neighbors.append(index)

        self.mines.append(mine)
        self._index_by_id[mine.id] = index
        self._coordinates[mine.position()] = mine.id

        logger.debug(
            f"Added mine ID={mine.id} at ({mine.x}, {mine.y}) power={mine.power}: "
            f"{len(mine.neighbors)} neighbors in range"
        )

    def _validate(self, mine: Mine):
        if mine.power < 0:
            raise ValidationError(
                f"cannot add mine with negative explosive Power={mine.power:f}, ID={mine.id}",
                reason=ValidationReason.NEGATIVE_POWER,
                mine_id=mine.id
            )

        if mine.id in self._index_by_id:
            raise ValidationError(
                f"cannot add two mines with same ID = {mine.id}",
                reason=ValidationReason.DUPLICATE_ID,
                mine_id=mine.id
            )

        if mine.position() in self._coordinates:
            raise ValidationError(
                f"cannot add two mines with same coordinates X={mine.x:f}, Y={mine.y:f}",
                reason=ValidationReason.DUPLICATE_COORDINATES,
                mine_id=mine.id
            )
