"""
Mitra POS Backend — Partner & User SQLAlchemy Models
======================================================

What:  ORM models for partners (`mitra`) and the staff accounts (`users`)
       that log in on their behalf.

Security Note:
    `users.password` is stored and compared in plaintext, matching the
    existing data. Hashing is out of scope for this service; the password is
    never included in any API response.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from mitrapos.database import Base


class Mitra(Base):
    """A partner/vendor outlet."""

    __tablename__ = "mitra"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    namamitra: Mapped[str | None] = mapped_column(String(255), nullable=True)
    lokasimitra: Mapped[str | None] = mapped_column(String(255), nullable=True)
    nomorhandphone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    # Person in charge
    nama_pic: Mapped[str | None] = mapped_column(String(255), nullable=True)
    nik_pic: Mapped[str | None] = mapped_column(String(50), nullable=True)


class User(Base):
    """A login account, optionally attached to a partner."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    role: Mapped[str | None] = mapped_column(String(50), nullable=True)
    mitra_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    nama_lengkap: Mapped[str | None] = mapped_column("namaLengkap", String(255), nullable=True)

    def __repr__(self) -> str:
        # Never include the password
        return f"<User(id={self.id}, username='{self.username}', role='{self.role}')>"
