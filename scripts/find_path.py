#!/usr/bin/env python3
"""
Find a path between two flow nodes of a deployed BPMN process.

Usage:
    python scripts/find_path.py StartEvent_1 ServiceTask_1
    python scripts/find_path.py approveInvoice invoiceProcessed --process-key invoice --verbose
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bpmn_path.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
