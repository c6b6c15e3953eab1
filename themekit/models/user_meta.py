from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from themekit.core.config import settings
from themekit.db.session import Base

class UserMeta(Base):
    __tablename__ = settings.usermeta_table
    umeta_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey(f"{settings.users_table}.ID"), nullable=False, index=True)
    meta_key: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    meta_value: Mapped[str | None] = mapped_column(Text, nullable=True)
