"""``python -m guildcrest_app`` entry point."""

from .cli import main

raise SystemExit(main())
