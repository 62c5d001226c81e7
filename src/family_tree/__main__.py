import sys

from family_tree.main import main

sys.exit(main())
