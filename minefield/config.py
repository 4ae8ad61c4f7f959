"""
Configuration for the minefield chain reaction ranker

All values can be overridden from the environment:
- MINEFIELD_INPUT_FILE: input file read when --file is not given (default: input.txt)
- MINEFIELD_WORKERS: number of threads used to simulate mines (default: 1)
- MINEFIELD_LOG_LEVEL: logging level name (default: INFO)
"""
import os

# Input
DEFAULT_INPUT_FILE: str = os.getenv("MINEFIELD_INPUT_FILE", "input.txt")
FIELDS_PER_LINE: int = 3  # X, Y, power

# Simulation
DEFAULT_WORKERS: int = int(os.getenv("MINEFIELD_WORKERS", "1"))

# Logging
LOG_LEVELS: tuple = ("DEBUG", "INFO", "WARNING", "ERROR")


def parse_log_level(name: str) -> str:
    """Normalized level name; unknown names fall back to INFO"""
    name = name.upper()
    return name if name in LOG_LEVELS else "INFO"


LOG_LEVEL: str = parse_log_level(os.getenv("MINEFIELD_LOG_LEVEL", "INFO"))
LOG_FORMAT: str = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
LOG_DATEFMT: str = '%H:%M:%S'
