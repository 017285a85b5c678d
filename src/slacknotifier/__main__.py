"""Allow ``python -m slacknotifier``."""

import sys

from slacknotifier.cli import main

sys.exit(main())
