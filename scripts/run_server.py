#!/usr/bin/env python3
"""
Run the Stripe payment server with uvicorn.

Usage:
  python scripts/run_server.py                 # HOST/PORT from env, default 0.0.0.0:3000
  python scripts/run_server.py --port 4242 -v
"""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.api.main import main

if __name__ == "__main__":
    sys.exit(main())
