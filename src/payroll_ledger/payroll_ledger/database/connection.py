from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

import mysql.connector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_settings(cls, db_config: Mapping[str, object]) -> "DBConfig":
        """Build from a settings module's ``DB_CONFIG`` dict."""
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config["user"]),
            password=str(db_config.get("password", "")),
            database=str(db_config["database"]),
        )

    def describe(self) -> str:
        return f"{self.user}@{self.host}:{self.port}/{self.database}"


class DatabaseConnection:
    """Hands out one fresh connection per ``db_cursor`` block or unit of work.

    Autocommit stays off: the payroll record and its ledger row must land in
    the same commit.
    """

    def __init__(self, config: DBConfig):
        self.config = config

    def connect(self):
        logger.debug("Opening MySQL connection to %s", self.config.describe())
        return mysql.connector.connect(
            host=self.config.host,
            port=self.config.port,
            user=self.config.user,
            password=self.config.password,
            database=self.config.database,
            autocommit=False,
            charset="utf8mb4",
        )
