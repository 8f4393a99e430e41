"""Allow ``python -m skills_lint``."""

from skills_lint.cli.main import main

raise SystemExit(main())
