import sys

from rawsync.main import main

sys.exit(main())
