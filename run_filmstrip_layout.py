"""
run_filmstrip_layout.py — CLI Entry Point

Forwards execution to the CLI logic defined in
`src/filmstrip_layout/cli.py`.

Usage:
    python run_filmstrip_layout.py --width 1280 --height 720 --columns 4 --rows 2

This wrapper allows you to run the tool directly without needing to
modify PYTHONPATH or install the project as a package.

For help on available options, run:
    python run_filmstrip_layout.py --help
"""
import sys
# Source code in src/ subdirectory
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import filmstrip_layout.cli as fl_cli

if __name__ == "__main__":
    raise SystemExit(fl_cli.main())
