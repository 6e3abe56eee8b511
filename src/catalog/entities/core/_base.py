import uuid
from datetime import UTC, datetime
from enum import StrEnum

import sqlalchemy as sa
from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


def new_id() -> str:
    """Generate a new entity identifier."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(UTC)


class EntityState(StrEnum):
    """Lifecycle state flag shared by all catalog records."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class RecordInfo(BaseModel):
    """Bookkeeping fields embedded by value in every domain entity."""

    created_at: datetime = PydanticField(default_factory=utcnow)
    updated_at: datetime = PydanticField(default_factory=utcnow)
    state: EntityState = PydanticField(default=EntityState.ACTIVE)


class RecordTable(SQLModel, table=False):
    """Columns shared by every catalog table: primary key, timestamps and state."""

    id: str = Field(
        primary_key=True,
        default_factory=new_id,
        description="Unique identifier for the record",
    )

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(
        default_factory=utcnow,
        nullable=False,
        sa_column_kwargs={
            "server_default": sa.func.now(),
            "onupdate": sa.func.now(),
        },
    )
    state: EntityState = Field(default=EntityState.ACTIVE)

    def record_info(self) -> RecordInfo:
        return RecordInfo(
            created_at=self.created_at,
            updated_at=self.updated_at,
            state=self.state,
        )
