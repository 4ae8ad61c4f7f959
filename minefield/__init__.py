"""
Minefield chain reaction ranker

Loads a field of mines, triggers a chain reaction from every mine and
reports the mines whose cascade has the busiest single time step.
"""
__version__ = "1.0.0"
