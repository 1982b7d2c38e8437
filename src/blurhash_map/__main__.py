"""Allow ``python -m blurhash_map``."""

from __future__ import annotations

from blurhash_map.cli.main import main

raise SystemExit(main())
