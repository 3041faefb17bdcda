"""
Evaluator configuration.
"""

from dataclasses import dataclass

import chess


@dataclass(frozen=True)
class EvaluatorConfig:
    """Configuration for the coverage evaluator.

    Defaults keep the legacy weights (100 per material point, 2 per
    threatened value). The scan rules differ from the legacy scoring even
    with both legacy switches on:
        - The square of a blocking piece counts as a step
        - Queen and king count each orthogonal and diagonal scan once
        - The knight uses all 8 distinct jumps
        - King diagonals are capped at 1 step like its orthogonals
    """

    # Weights
    material_scale: int = 100
    """Multiplier applied to the material difference"""

    threat_weight: int = 2
    """Multiplier applied to the summed value of threatened pieces"""

    # Scanning
    slider_range: int = 8
    """Maximum steps for bishop, rook and queen scans"""

    coverage_color: chess.Color = chess.WHITE
    """Side whose coverage is scored (legacy scoring always uses White)"""

    # Legacy behaviour
    legacy_bounds: bool = False
    """Use the 0 < index < 63 bounds check instead of file/rank bounds"""

    legacy_pawn_scan: bool = False
    """Scan the forward-right pawn diagonal twice instead of both diagonals"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.material_scale <= 0:
            raise ValueError(f"material_scale must be positive, got {self.material_scale}")

        if self.threat_weight < 0:
            raise ValueError(f"threat_weight must be non-negative, got {self.threat_weight}")

        if self.slider_range <= 0:
            raise ValueError(f"slider_range must be positive, got {self.slider_range}")

        if not isinstance(self.coverage_color, bool):
            raise ValueError(
                f"coverage_color must be chess.WHITE or chess.BLACK, got {self.coverage_color!r}"
            )


DEFAULT_CONFIG = EvaluatorConfig()
