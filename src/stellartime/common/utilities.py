"""Various helper functions that are used across multiple modules."""

from __future__ import annotations

# Standard Library Imports
import re

# Third Party Imports
import numpy as np

HTML_COLOR_PATTERN = re.compile(r"#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")
"""``re.Pattern``: ``#rrggbb`` colour strings."""


def strToVec3f(text: str | list[str]) -> np.ndarray:
    """Converts a ``"x,y,z"`` string, or a list of component strings, to a 3x1 vector.

    Args:
        text (``str`` | ``list``): comma separated components, or the components themselves.

    Returns:
        np.ndarray: vector of the first three components. Zeros if there are fewer than three
        components, and any component that isn't a number reads as zero.
    """
    components = text.split(",") if isinstance(text, str) else list(text)
    if len(components) < 3:
        return np.zeros(3)

    vector = np.zeros(3)
    for index, component in enumerate(components[:3]):
        try:
            vector[index] = float(component)
        except ValueError:
            vector[index] = 0.0
    return vector


def vec3fToHtmlColor(vector: np.ndarray) -> str:
    """Converts a 3x1 RGB vector, each channel in [0, 1], to ``#rrggbb`` notation.

    Channels are truncated to an 8-bit value and saturate at ``ff``.
    """
    return "#" + "".join(f"{min(255, int(channel * 255)):02x}" for channel in vector[:3])


def htmlColorToVec3f(color: str) -> np.ndarray:
    """Converts ``#rrggbb`` notation to a 3x1 RGB vector, each channel in [0, 1].

    Returns:
        np.ndarray: RGB vector, or zeros if `color` is malformed.
    """
    if (match := HTML_COLOR_PATTERN.fullmatch(color)) is None:
        return np.zeros(3)

    return np.array([int(channel, 16) / 255.0 for channel in match.groups()])


def isPowerOfTwo(value: int) -> bool:
    """Determine if `value` is a power of two, zero included."""
    return (value & -value) == value


def smallestPowerOfTwoGreaterOrEqualTo(value: int) -> int:
    """Return the smallest power of two that is at least `value`, or 0 if `value` is 0."""
    if value == 0:
        return 0

    power = 1
    while power < value:
        power <<= 1
    return power
