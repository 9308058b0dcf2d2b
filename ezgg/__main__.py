import sys

from ezgg.main import main

raise SystemExit(main(sys.argv[1:]))
