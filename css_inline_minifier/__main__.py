import sys

from css_inline_minifier.main import main

sys.exit(main())
