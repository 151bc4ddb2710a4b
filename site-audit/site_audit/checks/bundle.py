"""
Bundle Size Checker

Scans the framework's static build output, gzips every script and
stylesheet, and compares the totals against fixed budgets.
"""

import logging
import os
import zlib
from pathlib import Path
from typing import Optional

from ..exceptions import DirectoryNotFound
from ..models import Artifact, ArtifactKind, BudgetReport


logger = logging.getLogger(__name__)

STATIC_SUBDIR = "static"
SCRIPT_EXTENSIONS = (".js",)
STYLE_EXTENSIONS = (".css",)
SOURCE_MAP_MARKER = ".map"

# wbits=31 selects gzip framing
_GZIP_WBITS = 16 + zlib.MAX_WBITS


def gzip_size(path: Path, raw_size: int) -> int:
    """
    Gzipped size of a whole file at zlib's default compression level.

    Falls back to the raw size if the file cannot be read or compressed,
    so one bad file never aborts the run.

    Args:
        path: File to compress
        raw_size: Size on disk, used as the fallback

    Returns:
        Compressed size in bytes
    """
    try:
        data = path.read_bytes()
        compressor = zlib.compressobj(zlib.Z_DEFAULT_COMPRESSION, zlib.DEFLATED, _GZIP_WBITS)
        return len(compressor.compress(data)) + len(compressor.flush())
    except (OSError, zlib.error) as e:
        logger.warning("Could not get gzipped size for %s: %s", path, e)
        return raw_size


def classify(name: str) -> Optional[ArtifactKind]:
    """
    Decide which budget a file name counts against.

    Source maps are excluded even though they share an extension
    (e.g. "main.js.map", "app.map.js").

    Returns:
        "script", "style", or None for files that are not counted
    """
    if SOURCE_MAP_MARKER in name:
        return None
    if name.endswith(SCRIPT_EXTENSIONS):
        return "script"
    if name.endswith(STYLE_EXTENSIONS):
        return "style"
    return None


def scan(static_dir: Path) -> list[Artifact]:
    """
    Walk the static output depth-first and measure every counted file.

    Entries are visited in name order and subdirectories are entered as
    they are met. Symlinks are skipped entirely, so the walk always
    terminates.

    Args:
        static_dir: Root of the static assets

    Returns:
        Artifacts in discovery order
    """
    artifacts: list[Artifact] = []

    def _walk(directory: Path, prefix: str) -> None:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)

        for entry in entries:
            if entry.is_symlink():
                logger.debug("Skipping symlink %s%s", prefix, entry.name)
                continue

            if entry.is_dir(follow_symlinks=False):
                _walk(Path(entry.path), f"{prefix}{entry.name}/")
                continue

            if not entry.is_file(follow_symlinks=False):
                continue

            kind = classify(entry.name)
            if kind is None:
                continue

            size = entry.stat(follow_symlinks=False).st_size
            gzipped = gzip_size(Path(entry.path), size)
            logger.debug("%s%s (%s): %d bytes, %d gzipped", prefix, entry.name, kind, size, gzipped)

            artifacts.append(Artifact(
                path=f"{prefix}{entry.name}",
                kind=kind,
                size=size,
                gzipped=gzipped
            ))

    _walk(static_dir, "")
    return artifacts


def build_report(artifacts: list[Artifact]) -> BudgetReport:
    """Aggregate scanned artifacts into a budget report"""
    return BudgetReport(artifacts=artifacts)


def analyze(build_dir: Path) -> BudgetReport:
    """
    Measure the static build output and compare it against the budgets.

    Args:
        build_dir: Framework build output (e.g. "<project>/.next")

    Returns:
        BudgetReport covering every script and stylesheet under
        build_dir/static

    Raises:
        DirectoryNotFound: If build_dir or its static subdirectory is missing

    Example:
        report = analyze(Path(".next"))
        if not report.passed:
            for hint in report.hints:
                print(f"- {hint}")
    """
    static_dir = build_dir / STATIC_SUBDIR
    if not build_dir.is_dir():
        raise DirectoryNotFound(build_dir)
    if not static_dir.is_dir():
        raise DirectoryNotFound(static_dir)

    logger.info("Scanning %s", static_dir)
    artifacts = scan(static_dir)
    logger.info("Found %d artifacts", len(artifacts))

    return build_report(artifacts)
