from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric, String
from .base import Base


class Job(Base):
    __tablename__ = "jobs"
    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_jobs_salary_non_negative"),
        CheckConstraint("equity >= 0 AND equity <= 1", name="ck_jobs_equity_range"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Titles are unique across all jobs
    title = Column(String(255), unique=True, nullable=False)
    salary = Column(Integer, nullable=True)
    equity = Column(Numeric(4, 3), nullable=True)
    company_handle = Column(
        String(25),
        ForeignKey("companies.handle", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
