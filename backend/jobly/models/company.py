from sqlalchemy import Column, Integer, String, Text
from .base import Base


class Company(Base):
    """Companies are managed outside the jobs API; jobs only read them."""

    __tablename__ = "companies"

    handle = Column(String(25), primary_key=True)
    name = Column(String(255), unique=True, nullable=False)
    num_employees = Column(Integer, nullable=True)
    description = Column(Text, nullable=True)
    logo_url = Column(String(512), nullable=True)
