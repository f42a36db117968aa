import sys

from ghclient.cli import main

sys.exit(main())
