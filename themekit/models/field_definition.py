from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column
from themekit.db.session import Base
from themekit.models.common import TimestampMixin

class FieldDefinition(Base, TimestampMixin):
    __tablename__ = "field_definitions"
    key: Mapped[str] = mapped_column(String(80), primary_key=True)  # field_xxxxxxxx
    name: Mapped[str] = mapped_column(String(80), nullable=False, index=True)
    label: Mapped[str] = mapped_column(String(200), nullable=False)
    type: Mapped[str] = mapped_column(String(30), nullable=False)  # select|checkbox|radio|text
    choices: Mapped[dict | None] = mapped_column(JSON, nullable=True)
