import logging

from models import Employee, EmployeeData
from repositories import EmployeeRepository, StorageError

logger = logging.getLogger(__name__)


class EmployeeService:
    """Create and list employees, translating between wire and storage records."""

    def __init__(self, employee_repo: EmployeeRepository) -> None:
        self.employee_repo = employee_repo

    def create_employee(self, data: EmployeeData) -> Employee:
        employee = Employee(
            id=None,
            name=data.name,
            age=data.age,
            national_id=data.national_id,
            phone=data.phone,
            job_title=data.job_title,
            department=data.department,
            wage=data.wage,
        )

        try:
            return self.employee_repo.save(employee)
        except StorageError:
            raise
        except Exception as err:
            logger.exception('Unexpected error saving employee')
            raise StorageError(str(err)) from err

    def list_employees(self) -> list[EmployeeData]:
        try:
            employees = self.employee_repo.find_all()
        except StorageError:
            raise
        except Exception as err:
            logger.exception('Unexpected error listing employees')
            raise StorageError(str(err)) from err

        return [
            EmployeeData(
                name=employee.name,
                age=employee.age,
                national_id=employee.national_id,
                phone=employee.phone,
                job_title=employee.job_title,
                department=employee.department,
                wage=employee.wage,
            )
            for employee in employees
        ]
