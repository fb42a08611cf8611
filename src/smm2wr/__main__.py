import sys

from smm2wr.cli import main

sys.exit(main())
