"""Allow running the CLI with ``python -m bpmn_path``."""

import sys

from bpmn_path.cli import main

sys.exit(main())
