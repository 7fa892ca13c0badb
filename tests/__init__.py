from pathlib import Path
import sys

# Make the src/ package importable when tests run from a plain checkout
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))
