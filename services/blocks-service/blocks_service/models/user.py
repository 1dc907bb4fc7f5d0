from datetime import datetime

from sqlalchemy import Column, Date, DateTime, Enum, Integer, String

from ..database import Base
from .enums import UserRole


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    role = Column(Enum(UserRole, name="userroleenum", native_enum=False, length=32), nullable=False)
    start_date = Column(Date, nullable=True)
    estimated_squat_1rm = Column(Integer, nullable=True)
    estimated_bench_1rm = Column(Integer, nullable=True)
    estimated_deadlift_1rm = Column(Integer, nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role={self.role})>"
