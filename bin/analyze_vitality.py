#!/usr/bin/env python3
"""
Node Vitality Analysis CLI

Script wrapper around netvitality.adapters.inbound.cli for use from a
source checkout.

Usage:
    python bin/analyze_vitality.py graph.txt
    python bin/analyze_vitality.py graph.txt --scores --verbose
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from netvitality.adapters.inbound.cli import main


if __name__ == "__main__":
    sys.exit(main())
