import sys

from lingest.cli import main

sys.exit(main())
