from dataclasses import dataclass


@dataclass(slots=True)
class GridPosition:
    """Row/column of a tile entity inside the editor grid."""
    row: int
    col: int
