import sys

from ccl.main import main

sys.exit(main())
