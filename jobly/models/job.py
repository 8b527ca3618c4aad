from sqlalchemy import Column, Integer, Text, Numeric, ForeignKey, CheckConstraint
from jobly.core.database import Base


class Job(Base):
    """
    Job posting belonging to a company.

    Equity is a fraction between 0 and 1, returned to clients as a string.
    """
    __tablename__ = "jobs"
    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_jobs_salary"),
        CheckConstraint("equity <= 1.0", name="ck_jobs_equity"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False, index=True)
    salary = Column(Integer, nullable=True)
    equity = Column(Numeric, nullable=True)
    company_handle = Column(
        ForeignKey("companies.handle", ondelete="CASCADE"),
        nullable=False,
    )

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}', company_handle='{self.company_handle}')>"
