from datetime import datetime
from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from themekit.core.config import settings
from themekit.db.session import Base
from themekit.models.common import utcnow

class User(Base):
    __tablename__ = settings.users_table
    id: Mapped[int] = mapped_column("ID", Integer, primary_key=True, autoincrement=True)
    user_login: Mapped[str] = mapped_column(String(60), nullable=False, index=True)
    user_pass: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    user_nicename: Mapped[str] = mapped_column(String(50), nullable=False, default="", index=True)
    user_email: Mapped[str] = mapped_column(String(100), nullable=False, default="", index=True)
    user_url: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    user_registered: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
    user_status: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    display_name: Mapped[str] = mapped_column(String(250), nullable=False, default="")
