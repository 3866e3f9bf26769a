"""Main orchestration script for turning a documentation model dump into JSON."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the documentation JSON pipeline."""
    parser = argparse.ArgumentParser(
        description="Generate the flat JSON document for a crate model dump."
    )
    parser.add_argument(
        "model",
        type=Path,
        help="YAML dump of the crate documentation model",
    )
    parser.add_argument(
        "--out",
        type=Path,
        help="Output JSON file (default: doc_out/<model stem>.json)",
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run development checks (linting, tests) before converting",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail if a referenced local item is missing from the index",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent

    if args.dev:
        print("--- Running Development Checks ---")
        run_command([sys.executable, str(root_dir / "dev.py"), "--ci"])
        print("\nDevelopment checks passed. Proceeding with conversion.\n")

    out_file = args.out or root_dir / "doc_out" / f"{args.model.stem}.json"

    print("--- Converting documentation model to JSON ---")
    cmd: list[str | Path] = [
        sys.executable,
        "-m",
        "docjson.crate_to_json",
        str(args.model),
        str(out_file),
    ]
    if args.strict:
        cmd.append("--strict")
    if args.config:
        cmd.extend(["--config", args.config])

    run_command(cmd, cwd=root_dir)

    print(f"\nSUCCESS: Document written to {out_file}")


if __name__ == "__main__":
    main()
