from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.nexus_office.nexus_office.container import build_container


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store_config = dict(settings.STORE_CONFIG)
    container = build_container(store_config=store_config)

    removed = container.store.reset()
    print(f"OK: Removed {removed} key(s) from {store_config.get('path') or '<memory>'}")


if __name__ == "__main__":
    main()
