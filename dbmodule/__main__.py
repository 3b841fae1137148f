import sys

from dbmodule.main import main

sys.exit(main())
