from __future__ import annotations

from qnotepad.main import main

raise SystemExit(main())
