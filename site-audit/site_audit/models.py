"""
Data Models for Site Audit

Type-safe Pydantic models for bundle and accessibility reports.
All report models are frozen: a check produces them once and never mutates them.
"""

import re
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


ArtifactKind = Literal["script", "style"]
UsageClass = Literal["normal", "large", "decorative"]

# Budgets for gzipped output (bytes)
SCRIPT_BUDGET = 200 * 1024
STYLE_BUDGET = 50 * 1024
TOTAL_BUDGET = 250 * 1024

# A single script chunk above this is flagged in the largest-files table
LARGE_CHUNK_THRESHOLD = SCRIPT_BUDGET // 5

# Advice printed for each budget that is exceeded
SCRIPT_HINTS = (
    "Consider dynamic imports for large components",
    "Remove unused dependencies",
    "Use tree shaking for libraries",
)
STYLE_HINTS = (
    "Ensure Tailwind CSS purging is working",
    "Remove unused CSS rules",
)
TOTAL_HINTS = (
    "Split rarely visited routes into their own chunks",
    "Audit third-party packages for lighter alternatives",
)

HEX_COLOR_PATTERN = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)


class Artifact(BaseModel):
    """
    A script or stylesheet found in the static build output.

    Attributes:
        path: Path relative to the static root, "/"-separated
        kind: Whether the file counts against the script or style budget
        size: Raw size on disk in bytes
        gzipped: Gzip-compressed size in bytes (raw size if compression failed)
    """

    model_config = ConfigDict(frozen=True)

    path: str
    kind: ArtifactKind
    size: int = Field(ge=0)
    gzipped: int = Field(ge=0)

    @property
    def is_large(self) -> bool:
        """Script chunks over a fifth of the script budget deserve a look"""
        return self.kind == "script" and self.gzipped > LARGE_CHUNK_THRESHOLD


class BudgetReport(BaseModel):
    """
    Aggregated bundle sizes compared against the fixed budgets.

    Totals, verdicts and hints are all derived from the artifacts.

    Attributes:
        artifacts: Every counted file, in discovery order
    """

    model_config = ConfigDict(frozen=True)

    artifacts: list[Artifact] = Field(default_factory=list)

    @computed_field
    @property
    def script_total(self) -> int:
        return sum(a.gzipped for a in self.artifacts if a.kind == "script")

    @computed_field
    @property
    def style_total(self) -> int:
        return sum(a.gzipped for a in self.artifacts if a.kind == "style")

    @computed_field
    @property
    def total(self) -> int:
        return self.script_total + self.style_total

    @computed_field
    @property
    def script_ok(self) -> bool:
        return self.script_total <= SCRIPT_BUDGET

    @computed_field
    @property
    def style_ok(self) -> bool:
        return self.style_total <= STYLE_BUDGET

    @computed_field
    @property
    def total_ok(self) -> bool:
        return self.total <= TOTAL_BUDGET

    @computed_field
    @property
    def passed(self) -> bool:
        return self.script_ok and self.style_ok and self.total_ok

    @computed_field
    @property
    def largest(self) -> list[Artifact]:
        """Ten biggest artifacts by gzipped size; ties keep discovery order"""
        return sorted(self.artifacts, key=lambda a: a.gzipped, reverse=True)[:10]

    @computed_field
    @property
    def hints(self) -> list[str]:
        """Remediation advice for each budget that was exceeded"""
        hints: list[str] = []
        if not self.script_ok:
            hints.extend(SCRIPT_HINTS)
        if not self.style_ok:
            hints.extend(STYLE_HINTS)
        if not self.total_ok:
            hints.extend(TOTAL_HINTS)
        return hints


class ColorPair(BaseModel):
    """
    A foreground/background combination used somewhere on the site.

    Attributes:
        label: Human-readable description of where the pair is used
        fg: Foreground (text) color, normalized to lowercase #rrggbb
        bg: Background color, normalized to lowercase #rrggbb
        usage: Text context deciding which WCAG threshold applies
    """

    model_config = ConfigDict(frozen=True)

    label: str
    fg: str
    bg: str
    usage: UsageClass = "normal"

    @field_validator("fg", "bg")
    @classmethod
    def normalize_hex(cls, v: str) -> str:
        """Accept #RRGGBB or RRGGBB in any case"""
        match = HEX_COLOR_PATTERN.match(v.strip())
        if not match:
            raise ValueError(f"Expected a 6-digit hex color, got {v!r}")
        return "#" + "".join(match.groups()).lower()


class ContrastResult(BaseModel):
    """Computed contrast ratio and verdict for one ColorPair"""

    model_config = ConfigDict(frozen=True)

    pair: ColorPair
    ratio: float = Field(ge=1.0)
    required: float = Field(ge=0)
    passed: bool


class ContrastReport(BaseModel):
    """
    Outcome of verifying a list of color pairs.

    Attributes:
        results: One result per input pair, in input order
        passed: True when every non-decorative pair meets its threshold
    """

    model_config = ConfigDict(frozen=True)

    results: list[ContrastResult] = Field(default_factory=list)
    passed: bool = True

    @property
    def failures(self) -> list[ContrastResult]:
        return [r for r in self.results if not r.passed]


class TouchTarget(BaseModel):
    """
    Documented size of an interactive element.

    Sizes are recorded by hand from the design system, not measured.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    size: str
    passes: bool


class Config(BaseModel):
    """
    Configuration for the site audit tools.

    Loaded from .env file and environment variables.

    Attributes:
        project_root: Directory containing the framework build output
        build_dir: Name of the build output directory inside project_root
        log_level: Minimum level for diagnostic logging on stderr
    """

    project_root: Path = Field(default_factory=Path.cwd)
    build_dir: str = ".next"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @property
    def build_path(self) -> Path:
        """Full path to the build output directory"""
        return self.project_root / self.build_dir
