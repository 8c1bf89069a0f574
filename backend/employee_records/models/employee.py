from sqlalchemy import Column, Integer, String, Float, Boolean, Date, Index, UniqueConstraint, true

from employee_records.db.base_class import Base


class Employee(Base):
    __tablename__ = "employees"
    # Keep SQLite from reusing ids of deleted rows
    __table_args__ = (
        UniqueConstraint("email", name="uq_employees_email"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    phone_number = Column(String(50), nullable=True)
    department = Column(String(100), nullable=True)
    position = Column(String(100), nullable=True)
    salary = Column(Float, nullable=True)
    hire_date = Column(Date, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True, server_default=true())

    def __repr__(self) -> str:
        return f"<Employee id={self.id} email={self.email!r}>"


Index('idx_employees_department', Employee.department)
Index('idx_employees_is_active', Employee.is_active)
