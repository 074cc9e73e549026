import sys

from g048.play import main

sys.exit(main())
