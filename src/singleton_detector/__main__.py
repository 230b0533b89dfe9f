"""Allow ``python -m singleton_detector``."""

import sys

from singleton_detector.presentation.cli.main import main

sys.exit(main())
