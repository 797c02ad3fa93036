"""
Environment-driven configuration and logging setup.

HALALSCAN_RULES_PATH   optional YAML rule tables; unset means built-in tables
HALALSCAN_LOG_LEVEL    logging level name (default WARNING)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from halalscan.core.rules import DEFAULT_RULE_TABLES, RuleTables, load_rule_tables

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_rules_path() -> Path | None:
    value = os.environ.get("HALALSCAN_RULES_PATH", "").strip()
    return Path(value) if value else None


def get_log_level() -> int:
    name = os.environ.get("HALALSCAN_LOG_LEVEL", "WARNING").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def get_rule_tables(path: str | Path | None = None) -> RuleTables:
    """Resolve rule tables: explicit path, then HALALSCAN_RULES_PATH, then built-ins."""
    rules_path = Path(path) if path else get_rules_path()
    if rules_path is None:
        return DEFAULT_RULE_TABLES
    return load_rule_tables(rules_path)


def configure_logging(level: int | None = None) -> None:
    logging.basicConfig(level=level if level is not None else get_log_level(), format=LOG_FORMAT)


def log_config() -> None:
    rules_path = get_rules_path()
    logger.info(
        "CONFIG: rules_path=%s rules_exists=%s log_level=%s",
        rules_path,
        rules_path.exists() if rules_path else None,
        logging.getLevelName(get_log_level()),
    )
