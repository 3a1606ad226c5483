# constants.py
# ============

"""
constants.
=========

Does: Define the immutable parameter grids and hue tokens of the NCS-style
      catalog, plus the plausibility bounds that prune combinations absent
      from the published palette.
Used By: Catalog generation, code notation, descriptive naming.
Returns: Pure data structures only (no side effects).
"""

from typing import Dict, Tuple

NEUTRAL_HUE = "N"

# ── 1) Parameter grids ───────────────────────────────────────────────────────

BLACKNESS_VALUES: Tuple[int, ...] = (0, 5, 10, 15, 20, 30, 40, 50, 60, 70, 80, 85, 90)
CHROMATICNESS_VALUES: Tuple[int, ...] = (0, 2, 5, 10, 15, 20, 30, 40, 50, 60, 70, 80, 85, 90)


# ── 2) Hue circle ────────────────────────────────────────────────────────────

# Y → R → B → G → Y, one quadrant each
PRIMARY_HUE_ANGLES: Dict[str, float] = {"Y": 0.0, "R": 90.0, "B": 180.0, "G": 270.0}
HUE_SEQUENCE: Tuple[str, ...] = ("Y", "R", "B", "G")
HUE_BLEND_STEPS: Tuple[int, ...] = (10, 20, 30, 40, 50, 60, 70, 80, 90)


def _build_hue_tokens() -> Tuple[str, ...]:
    tokens = []
    for i, start in enumerate(HUE_SEQUENCE):
        towards = HUE_SEQUENCE[(i + 1) % len(HUE_SEQUENCE)]
        tokens.append(start)
        tokens.extend(f"{start}{step}{towards}" for step in HUE_BLEND_STEPS)
    return tuple(tokens)


# Y, Y10R, …, Y90R, R, R10B, …, G90Y
CHROMATIC_HUES: Tuple[str, ...] = _build_hue_tokens()
ALL_HUES: Tuple[str, ...] = (NEUTRAL_HUE, *CHROMATIC_HUES)


# ── 3) Plausibility bounds ───────────────────────────────────────────────────

MAX_TOTAL = 100  # blackness + chromaticness

# (min blackness, max chromaticness); checked in order
DARK_CHROMA_LIMITS: Tuple[Tuple[int, int], ...] = (
    (85, 15),
    (80, 20),
    (70, 30),
)
