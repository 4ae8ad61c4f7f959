"""
Peak extraction and mine ranking

Each mine's score is the peak interval of its own chain reaction: the
step with the most explosions, earliest step on ties. Mines are ranked by
peak explosions (desc), then X (asc), then Y (asc).
"""
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Sequence
import logging

from minefield.field import Field
from minefield.models import Interval, Mine
from minefield.simulator import simulate

logger = logging.getLogger(__name__)


def peak(explosions: Dict[int, int]) -> Interval:
    """
    Interval with the most explosions (earliest time wins a tie).

    Raises:
        ValueError: If no explosions were recorded
    """
    best = None
    for time, count in explosions.items():
        if (best is None or count > best.explosions or
                (count == best.explosions and time < best.time)):
            best = Interval(time=time, explosions=count)

    if best is None:
        raise ValueError("cannot find the peak of an empty explosion record")
    return best


def assign_peaks(field: Field, workers: int = 1):
    """
    Simulate a chain reaction from every mine and store its peak interval.

    Args:
        field: Loaded field
        workers: Number of threads; 1 runs the simulations in order
    """
    if workers <= 1:
        for mine in field:
            mine.peak = peak(simulate(field, mine))
    else:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            peaks = list(executor.map(lambda mine: peak(simulate(field, mine)), field.mines))
        for mine, interval in zip(field.mines, peaks):
            mine.peak = interval

    logger.debug(f"Simulated {len(field)} mines on {workers} workers")


def _peak_explosions(mine: Mine) -> int:
    if mine.peak is None:
        raise ValueError(f"mine ID={mine.id} has no peak interval")
    return mine.peak.explosions


def _rank_key(mine: Mine):
    return (-_peak_explosions(mine), mine.x, mine.y)


def rank_mines(mines: Sequence[Mine]) -> List[Mine]:
    """Sort mines best first: peak explosions desc, X asc, Y asc"""
    return sorted(mines, key=_rank_key)


def winners(ranked: Sequence[Mine]) -> List[Mine]:
    """Leading mines of a ranked list that share the highest peak explosion count"""
    if not ranked:
        return []

    best = _peak_explosions(ranked[0])
    result = []
    for mine in ranked:
        if _peak_explosions(mine) < best:
            break
        result.append(mine)
    return result
