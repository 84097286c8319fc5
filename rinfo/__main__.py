import sys

from rinfo.app import main

sys.exit(main())
