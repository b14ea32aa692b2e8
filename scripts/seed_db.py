from __future__ import annotations

import importlib
import logging

from config import get_settings_module

from keyon_parents.database.bootstrap import ensure_demo_parent

logger = logging.getLogger("keyon_parents.scripts.seed_db")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    ensure_demo_parent(db_config)
    logger.info(
        "demo parent ready -> %s@%s:%s/%s",
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )


if __name__ == "__main__":
    main()
