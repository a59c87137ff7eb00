"""
gridalgo Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


class Config:
    """Application configuration loaded from environment variables."""

    # Grid sampling
    # Boards sampled from the camera are square; 9 matches the printed vision board.
    GRID_SIZE: int = int(os.getenv("GRIDALGO_GRID_SIZE", "9"))

    # Engine defaults
    DEFAULT_TURN: str = os.getenv("GRIDALGO_DEFAULT_TURN", "BLACK")
    MAZE_SEED: int | None = _optional_int("GRIDALGO_MAZE_SEED")

    # Project Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    BOARDS_DIR: Path = Path(os.getenv("GRIDALGO_BOARDS_DIR", str(PROJECT_ROOT / "examples" / "boards")))

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        if cls.GRID_SIZE < 3:
            raise ValueError(
                "GRIDALGO_GRID_SIZE must be at least 3 "
                f"(got {cls.GRID_SIZE}); the maze generator needs a border ring."
            )

        if cls.DEFAULT_TURN.upper() not in ("BLACK", "RED"):
            raise ValueError(
                "GRIDALGO_DEFAULT_TURN must be 'BLACK' or 'RED' "
                f"(got {cls.DEFAULT_TURN!r})"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        seed = cls.MAZE_SEED if cls.MAZE_SEED is not None else "random"
        lines = [
            "gridalgo Configuration:",
            f"  Grid Size: {cls.GRID_SIZE}x{cls.GRID_SIZE}",
            f"  Default Turn: {cls.DEFAULT_TURN}",
            f"  Maze Seed: {seed}",
            f"  Boards: {cls.BOARDS_DIR}",
        ]
        return "\n".join(lines)
