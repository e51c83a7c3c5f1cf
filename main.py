"""Main orchestration script for running development checks and the audit."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path

from unchecked_audit.audit_unchecked import main as audit_main


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> int:
    """Optionally run checks, then audit the given source tree."""
    parser = argparse.ArgumentParser(
        description="Audit a Rust source tree for unchecked functions.",
        epilog="Any other arguments are passed through to the audit.",
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run development checks (linting, tests) before the audit",
    )
    args, audit_args = parser.parse_known_args()

    if args.dev:
        root_dir = Path(__file__).parent
        print("--- Running Development Checks ---")
        run_command([sys.executable, "-m", "ruff", "check", "."], cwd=root_dir)
        run_command([sys.executable, "-m", "pytest"], cwd=root_dir)
        print("\nDevelopment checks passed. Proceeding with the audit.\n")

    return audit_main(audit_args)


if __name__ == "__main__":
    raise SystemExit(main())
