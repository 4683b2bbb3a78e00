import sys

from gfycat_client.cli import main

sys.exit(main())
