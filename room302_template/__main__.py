import sys

from room302_template.cli.commands import main

sys.exit(main())
