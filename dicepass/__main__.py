import sys

from .passphrase import main

sys.exit(main())
