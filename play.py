"""
Play Reversi in the terminal.
"""
import sys
from pathlib import Path

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from reversi.cli import main

if __name__ == "__main__":
    sys.exit(main())
