#!/usr/bin/env python3
"""
PreviewFit runner script.

Run this file directly to start PreviewFit:
    python run.py
    python run.py --debug
    python run.py --profile front_portrait --window 1080x1920 --rotation 1 --print-fit
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

# Now import and run
from previewfit.main import main

if __name__ == "__main__":
    sys.exit(main())
