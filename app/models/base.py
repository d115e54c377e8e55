from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import DateTime
from sqlalchemy.dialects.mysql import DATETIME as MySQLDateTime
from sqlmodel import Field, SQLModel


def utc_now():
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid4())


def _timestamp_type():
    # MySQL DATETIME drops sub-second precision unless fsp is set
    return DateTime(timezone=True).with_variant(MySQLDateTime(fsp=6), "mysql")


class IDModel(SQLModel):
    id: str = Field(default_factory=new_id, primary_key=True, index=True)


class TimestampModel(SQLModel):
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=_timestamp_type(),
        sa_column_kwargs={"nullable": False},
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_type=_timestamp_type(),
        sa_column_kwargs={"nullable": False, "onupdate": utc_now},
    )
