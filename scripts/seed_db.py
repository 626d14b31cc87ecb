"""Load the default clinic roster (doctors, employees, other staff).

Existing names are kept as they are, so the script can be re-run safely.
"""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.clinic_attendance.clinic_attendance.container import build_container
from src.clinic_attendance.clinic_attendance.core.enums import StaffKind
from src.clinic_attendance.clinic_attendance.database.bootstrap import apply_seed_sql


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")

    staff = build_container(db_config=db_config).staff_service
    counts = {kind.value: len(staff.list_members(kind.value)) for kind in StaffKind}
    print(f"OK: roster in {db_config.get('database')} -> " + ", ".join(f"{k}={n}" for k, n in counts.items()))


if __name__ == "__main__":
    main()
