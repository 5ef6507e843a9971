from sqlmodel import SQLModel, Field
from uuid import uuid4, UUID
from datetime import datetime

class Household(SQLModel, table=True):
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str
    created_at: datetime = Field(default_factory=datetime.utcnow)
