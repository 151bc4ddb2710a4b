"""
Touch Target Size Checker

Advisory check for minimum touch target sizes (44×44px, WCAG 2.5.5).
Sizes come from a hand-maintained table, not from rendered layout, so
the result never gates CI.
"""

from typing import Iterable

from ..defaults import TOUCH_TARGETS
from ..models import TouchTarget


MIN_TOUCH_TARGET_PX = 44


def check_touch_targets(targets: Iterable[TouchTarget] = TOUCH_TARGETS) -> list[TouchTarget]:
    """
    Return the touch targets documented as smaller than the minimum.

    Example:
        for target in check_touch_targets():
            print(f"⚠ {target.name}: {target.size}")
    """
    return [target for target in targets if not target.passes]
