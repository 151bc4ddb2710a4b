"""
Command-Line Interface

CLI using rich for colored reports. Each command is a CI gate:
exit code 0 means every check passed, 1 means something needs attention.
"""

import json
import sys
from pathlib import Path
from typing import Callable, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .checks import analyze, check_touch_targets, verify
from .checks.sizing import MIN_TOUCH_TARGET_PX
from .config import load_config
from .defaults import COLOR_PAIRS, TOUCH_TARGETS
from .exceptions import DirectoryNotFound
from .logging_config import setup_logging
from .models import (
    SCRIPT_BUDGET,
    STYLE_BUDGET,
    TOTAL_BUDGET,
    BudgetReport,
    Config,
    ContrastReport,
)


console = Console()


def _common_options(func):
    """Options shared by every check command"""
    func = click.option(
        '--debug',
        is_flag=True,
        help='Verbose logging and full tracebacks on error'
    )(func)
    func = click.option(
        '--env-file',
        default=None,
        type=click.Path(exists=True, dir_okay=False),
        help='Path to .env file (defaults to ./.env)'
    )(func)
    func = click.option(
        '--output',
        default='rich',
        type=click.Choice(['rich', 'json'], case_sensitive=False),
        help='Output format: rich (colored terminal) or json (for other tools)'
    )(func)
    return func


@click.group()
@click.version_option(version=__version__)
def main():
    """
    Site Audit - build-time quality gates for the portfolio site

    Examples:

      # Check bundle budgets after `npm run build`
      site-audit bundle-size

      # Check color contrast of the design palette
      site-audit contrast

      # Run everything, JSON for CI annotations
      site-audit all --output json
    """


@main.command('bundle-size')
@click.option(
    '--project-root',
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help='Directory containing the build output. Defaults to SITE_AUDIT_PROJECT_ROOT or cwd'
)
@_common_options
def bundle_size(project_root: Optional[Path], output: str, env_file: Optional[str], debug: bool):
    """Check gzipped JS/CSS sizes against the performance budget."""

    def task() -> bool:
        config = _setup(env_file, debug)
        return _check_bundle(_build_path(config, project_root), output)

    sys.exit(0 if _run_guarded(task, debug) else 1)


@main.command('contrast')
@_common_options
def contrast(output: str, env_file: Optional[str], debug: bool):
    """Verify palette color contrast against WCAG 2.1 AA."""

    def task() -> bool:
        _setup(env_file, debug)
        return _check_contrast(output)

    sys.exit(0 if _run_guarded(task, debug) else 1)


@main.command('all')
@click.option(
    '--project-root',
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help='Directory containing the build output. Defaults to SITE_AUDIT_PROJECT_ROOT or cwd'
)
@_common_options
def run_all(project_root: Optional[Path], output: str, env_file: Optional[str], debug: bool):
    """Run the bundle size and contrast checks."""

    def task() -> bool:
        config = _setup(env_file, debug)
        build_path = _build_path(config, project_root)

        if output == 'json':
            payload = {
                "bundle": _bundle_payload(build_path),
                "contrast": _contrast_payload(verify(COLOR_PAIRS)),
            }
            print(json.dumps(payload, indent=2))
            return payload["bundle"]["passed"] and payload["contrast"]["passed"]

        bundle_ok = _check_bundle(build_path, output)
        contrast_ok = _check_contrast(output)
        return bundle_ok and contrast_ok

    sys.exit(0 if _run_guarded(task, debug) else 1)


def _setup(env_file: Optional[str], debug: bool) -> Config:
    config = load_config(Path(env_file) if env_file else None)
    setup_logging("DEBUG" if debug else config.log_level)
    return config


def _build_path(config: Config, project_root: Optional[Path]) -> Path:
    if project_root is not None:
        return project_root / config.build_dir
    return config.build_path


def _run_guarded(task: Callable[[], bool], debug: bool) -> bool:
    """Run a check, turning interrupts and unexpected errors into exit codes"""
    try:
        return task()
    except KeyboardInterrupt:
        console.print("\n[yellow]⚠️  Interrupted by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print(f"[red]❌ Error: {escape(str(e))}[/red]")
        if debug:
            console.print_exception()
        sys.exit(1)


# ---------------------------------------------------------------------------
# Bundle size
# ---------------------------------------------------------------------------

def _check_bundle(build_path: Path, output: str) -> bool:
    if output == 'json':
        payload = _bundle_payload(build_path)
        print(json.dumps(payload, indent=2))
        return payload["passed"]

    try:
        report = analyze(build_path)
    except DirectoryNotFound as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        console.print('Run "npm run build" first.')
        return False

    _output_bundle_rich(report, build_path)
    return report.passed


def _bundle_payload(build_path: Path) -> dict:
    try:
        report = analyze(build_path)
    except DirectoryNotFound as e:
        return {"passed": False, "error": f'{e}. Run "npm run build" first.'}
    return report.model_dump(mode="json")


def format_bytes(num_bytes: int) -> str:
    """Format a byte count as kilobytes with two decimals"""
    return f"{num_bytes / 1024:.2f}KB"


def _status(ok: bool) -> str:
    return "[green]✅ PASS[/green]" if ok else "[red]❌ FAIL[/red]"


def _output_bundle_rich(report: BudgetReport, build_path: Path):
    """Output bundle report in rich formatted terminal output"""

    console.print()
    console.print(Panel.fit(
        f"[bold]📦 Bundle Size Analysis[/bold]\n"
        f"Build: {escape(str(build_path))}",
        border_style="cyan"
    ))

    console.print("\n[bold]🔍 Largest Files[/bold]")
    if report.largest:
        files_table = Table(show_header=True, header_style="bold magenta")
        files_table.add_column("", justify="center")
        files_table.add_column("File", style="cyan")
        files_table.add_column("Type")
        files_table.add_column("Gzipped", justify="right")
        files_table.add_column("Raw", justify="right")

        for artifact in report.largest:
            files_table.add_row(
                "⚠️" if artifact.is_large else "✅",
                escape(artifact.path),
                "JS" if artifact.kind == "script" else "CSS",
                format_bytes(artifact.gzipped),
                format_bytes(artifact.size)
            )
        console.print(files_table)
    else:
        console.print("[dim]No JavaScript or CSS files found[/dim]")

    console.print("\n[bold]🎯 Performance Budget[/bold]")
    budget_table = Table(show_header=True, header_style="bold magenta")
    budget_table.add_column("Category", style="cyan")
    budget_table.add_column("Gzipped", justify="right")
    budget_table.add_column("Limit", justify="right")
    budget_table.add_column("Status", justify="center")

    budget_table.add_row("JavaScript", format_bytes(report.script_total), format_bytes(SCRIPT_BUDGET), _status(report.script_ok))
    budget_table.add_row("CSS", format_bytes(report.style_total), format_bytes(STYLE_BUDGET), _status(report.style_ok))
    budget_table.add_row("[bold]Total[/bold]", format_bytes(report.total), format_bytes(TOTAL_BUDGET), _status(report.total_ok))
    console.print(budget_table)

    if report.hints:
        console.print("\n[bold]💡 Optimization suggestions[/bold]")
        for hint in report.hints:
            console.print(f"  - {hint}")

    if report.passed:
        console.print("\n[bold green]🎉 All bundle size checks passed![/bold green]")
    else:
        console.print("\n[bold red]✗ Bundle exceeds the performance budget[/bold red]")
    console.print()


# ---------------------------------------------------------------------------
# Contrast
# ---------------------------------------------------------------------------

def _check_contrast(output: str) -> bool:
    report = verify(COLOR_PAIRS)

    if output == 'json':
        print(json.dumps(_contrast_payload(report), indent=2))
    else:
        _output_contrast_rich(report)

    return report.passed


def _contrast_payload(report: ContrastReport) -> dict:
    return {
        **report.model_dump(mode="json"),
        "touch_targets": [t.model_dump(mode="json") for t in TOUCH_TARGETS],
    }


def _output_contrast_rich(report: ContrastReport):
    """Output contrast report in rich formatted terminal output"""

    console.print()
    console.print(Panel.fit(
        "[bold]Color Contrast Verification[/bold]\n"
        "WCAG 2.1 AA: 4.5:1 normal text, 3:1 large text (18pt+ or 14pt+ bold)",
        border_style="cyan"
    ))

    contrast_table = Table(show_header=True, header_style="bold magenta")
    contrast_table.add_column("Check", style="cyan")
    contrast_table.add_column("Colors")
    contrast_table.add_column("Ratio", justify="right")
    contrast_table.add_column("Required", justify="right")
    contrast_table.add_column("Status", justify="center")

    for result in report.results:
        pair = result.pair
        if pair.usage == "decorative":
            ratio = "[dim]decorative[/dim]"
            required = "-"
        else:
            ratio = f"{result.ratio:.2f}:1"
            required = f"{result.required:g}:1"
        contrast_table.add_row(
            escape(pair.label),
            f"{pair.fg} on {pair.bg}",
            ratio,
            required,
            "[green]✓ PASS[/green]" if result.passed else "[red]✗ FAIL[/red]"
        )
    console.print(contrast_table)

    console.print(f"\n[bold]👆 Touch Targets[/bold] (minimum {MIN_TOUCH_TARGET_PX}x{MIN_TOUCH_TARGET_PX}px on mobile)")
    warnings = check_touch_targets()
    for target in TOUCH_TARGETS:
        status = "[yellow]⚠ WARNING[/yellow]" if target in warnings else "[green]✓ PASS[/green]"
        console.print(f"  {status} {escape(target.name)}: {escape(target.size)}")
    console.print("[dim]  Touch targets are enforced via CSS media query for mobile devices[/dim]")

    if report.passed:
        console.print("\n[bold green]✓ All color combinations meet WCAG 2.1 AA standards[/bold green]")
    else:
        console.print("\n[bold red]✗ Some color combinations do not meet WCAG 2.1 AA standards[/bold red]")
        for result in report.failures:
            console.print(f"  🔴 {escape(result.pair.label)}: {result.ratio:.2f}:1 (required {result.required:g}:1)")
    console.print()


if __name__ == "__main__":
    main()
