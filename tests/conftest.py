import sys
import os

# Add src/ to sys.path so the suite runs without installing the package.
_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.join(_project_root, "src"))
