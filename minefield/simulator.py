"""
Chain reaction simulator

Triggering a mine explodes it at time 0. Every unexploded mine within the
power of a mine that exploded at time t explodes at time t + 1, until a
step produces no explosions.
"""
from typing import Dict, List
import logging

from minefield.field import Field
from minefield.models import Mine

logger = logging.getLogger(__name__)


def simulate(field: Field, start: Mine) -> Dict[int, int]:
    """
    Run the chain reaction started by `start`.

    Exploded state is local to the call, so the field is never mutated and
    simulations over the same field may run concurrently.

    Args:
        field: Field the mine belongs to
        start: Trigger mine

    Returns:
        Mapping of time step -> number of mines that exploded in it, in
        ascending time order. Only steps with at least one explosion appear.
    """
    exploded = [False] * len(field.mines)
    explosions: Dict[int, int] = {}

    frontier: List[int] = [field.index_of(start)]
    time = 0
    while frontier:
        next_frontier: List[int] = []
        for index in frontier:
            # a mine can be queued more than once per step
            if exploded[index]:
                continue
            exploded[index] = True
            explosions[time] = explosions.get(time, 0) + 1

            for neighbor in field.mines[index].neighbors:
                if not exploded[neighbor]:
                    next_frontier.append(neighbor)

        frontier = next_frontier
        time += 1

    logger.debug(
        f"Mine ID={start.id}: {sum(explosions.values())} explosions over {len(explosions)} steps"
    )
    return explosions
