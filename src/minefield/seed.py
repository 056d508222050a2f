"""
Seed codec.

A seed is the comma separated integer list ``width,height,mine,mine,...``.
It is the shareable form of a game: parsing it always yields the same
board.
"""
import re
from dataclasses import dataclass
from typing import List, Optional, Union

import numpy as np

from .config import GameConfig, InvalidConfig, InvalidReason


INTEGER_TOKEN = re.compile(r"[+-]?\d+")
SEPARATOR = ","


# ============================================================================
# Parse Result
# ============================================================================

@dataclass(frozen=True)
class SeedResult:
    """
    Outcome of parsing a seed.

    Exactly one of ``config`` and ``error`` is set.

    Attributes:
        config: The parsed configuration on success.
        error: Why the seed was rejected.
        detail: Human readable explanation of the rejection.
    """

    config: Optional[GameConfig] = None
    error: Optional[InvalidReason] = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        """Whether the seed produced a configuration."""
        return self.config is not None

    def unwrap(self) -> GameConfig:
        """Return the config or raise InvalidConfig."""
        if self.config is None:
            raise InvalidConfig(self.error, self.detail)
        return self.config


def _invalid(reason: InvalidReason, detail: str) -> SeedResult:
    return SeedResult(error=reason, detail=detail)


# ============================================================================
# Parsing / Encoding
# ============================================================================

def _parse_tokens(text: str) -> Union[List[int], SeedResult]:
    """Split seed text into integers, or return the failure."""
    values = []
    for position, token in enumerate(text.split(SEPARATOR)):
        token = token.strip()
        if not INTEGER_TOKEN.fullmatch(token):
            return _invalid(
                InvalidReason.MALFORMED_TOKEN,
                f"Token {position} ({token!r}) is not an integer",
            )
        values.append(int(token))
    return values


def parse_seed(text: str) -> SeedResult:
    """
    Parse a seed string into a game configuration.

    Whitespace around tokens is ignored. Repeated mine indices are kept
    once, in order of first appearance.

    Args:
        text: Seed of the form ``width,height[,mine...]``.

    Returns:
        SeedResult holding either the config or the rejection reason.
    """
    if len(text.split(SEPARATOR)) < 2:
        return _invalid(
            InvalidReason.MISSING_DIMENSIONS,
            "Seed needs at least a width and a height",
        )

    parsed = _parse_tokens(text)
    if isinstance(parsed, SeedResult):
        return parsed

    width, height, *mine_indices = parsed
    if width <= 0:
        return _invalid(
            InvalidReason.NON_POSITIVE_WIDTH, f"Width must be positive, got {width}"
        )
    if height <= 0:
        return _invalid(
            InvalidReason.NON_POSITIVE_HEIGHT, f"Height must be positive, got {height}"
        )

    cell_count = width * height
    for index in mine_indices:
        if not 0 <= index < cell_count:
            return _invalid(
                InvalidReason.MINE_OUT_OF_RANGE,
                f"Mine index {index} outside 0..{cell_count - 1}",
            )

    return SeedResult(config=GameConfig.from_mines(width, height, mine_indices))


def encode_seed(config: GameConfig) -> str:
    """Encode a configuration as seed text."""
    values = [config.width, config.height, *config.mines]
    return SEPARATOR.join(str(value) for value in values)


# ============================================================================
# Random Boards
# ============================================================================

def generate_config(
    width: int,
    height: int,
    num_mines: int,
    rng: Union[np.random.Generator, int, None] = None,
) -> GameConfig:
    """
    Place mines uniformly at random.

    Args:
        width: Number of columns.
        height: Number of rows.
        num_mines: Mines to place, between 0 and width * height.
        rng: Generator or integer seed; the same seed gives the same board.

    Returns:
        A new configuration with sorted mine indices.
    """
    if width <= 0 or height <= 0:
        raise ValueError("Board dimensions must be positive")
    if not 0 <= num_mines <= width * height:
        raise ValueError(f"Mine count must be between 0 and {width * height}")

    generator = rng
    if not isinstance(rng, np.random.Generator):
        generator = np.random.default_rng(rng)
    mines = generator.choice(width * height, size=num_mines, replace=False)
    return GameConfig(width, height, tuple(sorted(int(index) for index in mines)))
