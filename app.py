from __future__ import annotations

import os
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent
for p in (REPO_ROOT, REPO_ROOT / "src" / "overtime_tracker"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from overtime_tracker.main import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "3000")), debug=app.config["DEBUG"])
