import sys

from tellersim.cli import main

sys.exit(main())
