#!/usr/bin/env python3
"""Formatting, lint and type checks for the sv package."""

import argparse
import subprocess
import sys
from pathlib import Path

from rich.console import Console

console = Console()


def run_command(command: list[str], description: str) -> bool:
    console.print(f"[bold blue]Running {description}...[/bold blue]")

    tool_path = Path(sys.executable).parent / command[0]
    if tool_path.exists():
        command = [str(tool_path), *command[1:]]

    try:
        result = subprocess.run(command, check=False, capture_output=True, text=True)
    except OSError as e:
        console.print(f"[bold red]Error running {description}: {e}[/bold red]")
        return False

    if result.returncode != 0:
        console.print(f"[bold red]FAILED: {description}[/bold red]")
        console.print(result.stdout)
        console.print(result.stderr)
        return False
    console.print(f"[bold green]PASSED: {description}[/bold green]")
    return True


def main() -> int:
    parser = argparse.ArgumentParser(description="Run quality checks")
    parser.add_argument("--fix", action="store_true", help="Auto-fix issues where possible")
    args = parser.parse_args()

    if args.fix:
        checks = [
            (["ruff", "format", "."], "Ruff Formatting (Fix)"),
            (["ruff", "check", "--fix", "."], "Ruff Linting (Fix)"),
        ]
    else:
        checks = [
            (["ruff", "format", "--check", "."], "Ruff Formatting (Check)"),
            (["ruff", "check", "."], "Ruff Linting (Check)"),
        ]
    checks.append((["mypy", "sv"], "Mypy Type Checking"))

    results = [run_command(command, description) for command, description in checks]
    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
