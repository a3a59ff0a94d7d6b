import sys

from termgym.main import main


sys.exit(main())
