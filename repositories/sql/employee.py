import logging

import dacite
from sqlalchemy import Engine, Float, Integer, String, select
from sqlalchemy.orm import Mapped, mapped_column

from models import Employee
from repositories import EmployeeRepository

from .base import Base, SqlBaseRepository

logger = logging.getLogger(__name__)


class EmployeeRow(Base):
    __tablename__ = 'tb_employee'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(String(255))
    age: Mapped[int | None] = mapped_column(Integer)
    national_id: Mapped[str | None] = mapped_column('cpf', String(255))
    phone: Mapped[str | None] = mapped_column('celullar', String(255))
    job_title: Mapped[str | None] = mapped_column('office', String(255))
    department: Mapped[str | None] = mapped_column('sector', String(255))
    wage: Mapped[float | None] = mapped_column(Float)


def row_to_employee(row: EmployeeRow) -> Employee:
    data = {
        'id': row.id,
        'name': row.name,
        'age': row.age,
        'national_id': row.national_id,
        'phone': row.phone,
        'job_title': row.job_title,
        'department': row.department,
        'wage': row.wage,
    }
    return dacite.from_dict(data_class=Employee, data=data)


class SqlEmployeeRepository(EmployeeRepository, SqlBaseRepository):
    def __init__(self, engine: Engine) -> None:
        SqlBaseRepository.__init__(self, engine)

    def save(self, employee: Employee) -> Employee:
        # The id is always assigned by the database, even if the caller set one
        row = EmployeeRow(
            name=employee.name,
            age=employee.age,
            national_id=employee.national_id,
            phone=employee.phone,
            job_title=employee.job_title,
            department=employee.department,
            wage=employee.wage,
        )

        with self.session(write=True) as session:
            session.add(row)
            session.flush()

        logger.info('Saved employee %s', row.id)
        return row_to_employee(row)

    def find_all(self) -> list[Employee]:
        with self.session() as session:
            rows = session.scalars(select(EmployeeRow).order_by(EmployeeRow.id)).all()
            return [row_to_employee(row) for row in rows]
