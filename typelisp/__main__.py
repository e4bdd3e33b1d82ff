import sys

from typelisp.repl import main

sys.exit(main())
