import sys

from moversim.cli import main

sys.exit(main())
