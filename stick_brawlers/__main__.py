import sys

from stick_brawlers.main import main

sys.exit(main())
