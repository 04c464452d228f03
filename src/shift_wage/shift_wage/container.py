from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .database.connection import DBConfig, DatabaseConnection
from .payroll.calculator.base import WageCalculator
from .records.mysql_record_repository import MySQLWorkRecordRepository
from .records.repository import WorkRecordRepository
from .records.service import WorkRecordService


@dataclass(frozen=True)
class Container:
    records_repo: WorkRecordRepository
    record_service: WorkRecordService


def build_container(
    *,
    db_config: Optional[dict] = None,
    records_repo: Optional[WorkRecordRepository] = None,
    calculator: Optional[WageCalculator] = None,
) -> Container:
    if records_repo is None:
        if db_config is None:
            raise ValueError("db_config is required when no records_repo is given")
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
        records_repo = MySQLWorkRecordRepository(conn)

    return Container(
        records_repo=records_repo,
        record_service=WorkRecordService(records_repo, calculator=calculator),
    )
