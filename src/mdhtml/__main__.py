"""Allow ``python -m mdhtml``."""

from mdhtml.cli import main

raise SystemExit(main())
