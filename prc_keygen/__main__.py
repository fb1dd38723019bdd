import sys
from prc_keygen.cli import main

sys.exit(main())
