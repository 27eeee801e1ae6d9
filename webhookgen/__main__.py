import sys

from webhookgen.cli import main

sys.exit(main())
