
"""Tunable defaults and the GameConfig handed to the controller"""
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple

Color = Tuple[int, int, int]

# Colors per shape letter
COLORS: Dict[str, Color] = {
    "I": (102, 224, 255),
    "J": (106, 119, 255),
    "L": (255, 158, 94),
    "O": (255, 224, 102),
    "S": (94, 224, 142),
    "T": (200, 119, 255),
    "Z": (255, 102, 119),
}

CONFIG = {
    "COLS": 10,               # Board width in cells
    "ROWS": 20,               # Board height in cells
    "CELL_SIZE": 32,          # Pixel edge of a cell; also the per-cell fall threshold
    "BASE_SPEED": 64.0,       # Fall speed in px/s (2 cells/s at 32px)
    "FAST_SPEED": 128.0,      # Fall speed while soft drop is held
    "SEED": None,             # Int for reproducible piece sequences
    "FPS": 60,
    "LOG_LEVEL": "INFO",
    "SCORE_TABLE": {1: 40, 2: 100, 3: 300, 4: 1200},
}


@dataclass(frozen=True)
class GameConfig:
    cols: int = 10
    rows: int = 20
    cell_size: int = 32
    base_speed: float = 64.0
    fast_speed: float = 128.0
    seed: Optional[int] = None
    score_table: Mapping[int, int] = field(default_factory=lambda: dict(CONFIG["SCORE_TABLE"]))
    palette: Mapping[str, Color] = field(default_factory=lambda: dict(COLORS))

    def __post_init__(self):
        if self.cols < 4 or self.rows < 2:
            raise ValueError(f"board too small: {self.cols}x{self.rows}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if not 0 < self.base_speed <= self.fast_speed:
            raise ValueError(
                f"need 0 < base_speed <= fast_speed, got {self.base_speed}/{self.fast_speed}")

    @property
    def fall_threshold(self) -> float:
        return float(self.cell_size)

    @staticmethod
    def from_mapping(cfg: Mapping = CONFIG) -> "GameConfig":
        return GameConfig(
            cols=int(cfg["COLS"]),
            rows=int(cfg["ROWS"]),
            cell_size=int(cfg["CELL_SIZE"]),
            base_speed=float(cfg["BASE_SPEED"]),
            fast_speed=float(cfg["FAST_SPEED"]),
            seed=cfg.get("SEED"),
            score_table=dict(cfg.get("SCORE_TABLE", CONFIG["SCORE_TABLE"])),
        )
