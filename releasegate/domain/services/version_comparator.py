"""Three-part numeric version comparison used by the version-vs-tag check.

The scan only ever answers "yes" at the first component where ``current`` is
smaller than ``candidate``. A larger component does not end the scan, so
``is_newer("1.3.0", "1.2.9")`` is True because ``0 < 9`` at the patch index.
This is intentionally not semver ordering.
"""

import math
import re

COMPONENTS = 3

_NON_DIGITS = re.compile(r"[^0-9]")


def _parse_component(text: str) -> float:
    digits = _NON_DIGITS.sub("", text)
    if not digits:
        return math.nan
    return float(int(digits))


def parse_version(version: str) -> tuple[float, ...]:
    """Split version into its first three numeric components.

    Non-digit characters are stripped from each component. Empty or missing
    components become NaN, which never compares less than anything.
    """
    parts = version.split(".")
    return tuple(
        _parse_component(parts[i]) if i < len(parts) else math.nan for i in range(COMPONENTS)
    )


def is_newer(current: str, candidate: str) -> bool:
    """Return True if candidate has a smaller-to-larger step over current at any index."""
    current_parts = parse_version(current)
    candidate_parts = parse_version(candidate)
    for i in range(COMPONENTS):
        if current_parts[i] < candidate_parts[i]:
            return True
    return False
