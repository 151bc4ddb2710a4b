"""
Automated Site Checks

Deterministic CI gates for the built site: bundle size budgets,
color contrast, and the advisory touch target table.
"""

from .bundle import analyze
from .contrast import contrast_ratio, verify
from .sizing import check_touch_targets

__all__ = ["analyze", "contrast_ratio", "verify", "check_touch_targets"]
