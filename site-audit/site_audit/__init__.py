"""
Site Audit - Build-time quality gates

Deterministic CI checks for the portfolio site:
- Bundle size budgets for gzipped JavaScript and CSS
- WCAG 2.1 AA color contrast of the design palette
- Advisory touch target sizes
"""

from .models import Artifact, BudgetReport, ColorPair, ContrastReport, ContrastResult, TouchTarget

__version__ = "0.1.0"
__all__ = [
    "Artifact",
    "BudgetReport",
    "ColorPair",
    "ContrastReport",
    "ContrastResult",
    "TouchTarget",
]
