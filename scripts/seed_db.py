"""Load database/seed.sql, the per-role demo logins and the default Super Admin.

The Super Admin credentials can be overridden with SUPERADMIN_USERNAME,
SUPERADMIN_PASSWORD and SUPERADMIN_EMAIL.
"""

from __future__ import annotations

import importlib
import os
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.office_records.office_records.database.bootstrap import (
    apply_seed_sql,
    ensure_demo_users,
    ensure_super_admin,
)


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
    ensure_super_admin(
        db_config,
        username=os.getenv("SUPERADMIN_USERNAME", "superadmin"),
        password=os.getenv("SUPERADMIN_PASSWORD", "admin123"),
        email=os.getenv("SUPERADMIN_EMAIL", "superadmin@localhost"),
    )
    ensure_demo_users(db_config)
    print(f"seeded {db_config.get('database')}@{db_config.get('host')}")


if __name__ == "__main__":
    main()
