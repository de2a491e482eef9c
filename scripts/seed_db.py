from __future__ import annotations

import importlib
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.nexus_office.nexus_office.container import build_container
from src.nexus_office.nexus_office.database.bootstrap import seed_today_attendance


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store_config = dict(settings.STORE_CONFIG)
    container = build_container(store_config=store_config)

    created = seed_today_attendance(container.attendance_repo, container.users_repo, now=datetime.now())

    print(
        f"OK: Seeded {created} attendance record(s) -> "
        f"{store_config.get('path') or '<memory>'} (namespace={store_config.get('namespace')})"
    )


if __name__ == "__main__":
    main()
