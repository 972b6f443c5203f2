"""DevOps tasks for fsutil.

Usage: uv run devops.py <task>
Tasks: fmt, test, clean
"""

import subprocess
import sys
from pathlib import Path

from fsutil.filesystem import lsr, rmrf

# Cache and build artifacts removed by `clean`
_ARTIFACT_DIRS: tuple[str, ...] = (
    ".pytest_cache",
    ".ruff_cache",
    ".mypy_cache",
    "htmlcov",
    "build",
    "dist",
)


def _run(commands: list[list[str]]) -> None:
    """Execute a sequence of shell commands, exiting on first failure."""
    for cmd in commands:
        try:
            subprocess.run(cmd, check=True)  # nosec: B603, B607
        except subprocess.CalledProcessError as e:
            print(f"Command failed: {' '.join(e.cmd)}", file=sys.stderr)
            sys.exit(e.returncode)


def format_code() -> None:
    """Format the codebase with Ruff."""
    print("🎨 [Native Task] Formatting with Ruff...\n")
    _run(
        [
            ["ruff", "format", "."],
            ["ruff", "check", "--fix", "."],
        ]
    )
    print("\n🟢 Made everything pretty → ✅ Code clean.")


def test() -> None:
    """Run tests with PyTest."""
    print("🧪 [Native Task] Testing with PyTest...\n")
    _run([["uv", "run", "pytest", "-q"]])
    print("\n🟢 Tests → ✅ Passed")


def clean() -> None:
    """Remove Python caches and build artifacts below the project root."""
    root = Path(".")
    print("🧹 [Native Task] Cleaning the Project...\n")
    targets = [root / name for name in _ARTIFACT_DIRS]
    targets += [p for p in lsr([root]) if p.name == "__pycache__" or p.name.endswith(".egg-info")]
    if not rmrf(targets):
        print("Some artifacts could not be removed", file=sys.stderr)
        sys.exit(1)
    print("\n🟢 Caches & Artifacts → ✅ All fresh now")


_TASKS = {"fmt": format_code, "test": test, "clean": clean}


if __name__ == "__main__":
    if len(sys.argv) != 2 or sys.argv[1] not in _TASKS:
        print(__doc__, file=sys.stderr)
        sys.exit(2)
    _TASKS[sys.argv[1]]()
