import sys

from filecrypt.frontend.cli.app import main

sys.exit(main())
