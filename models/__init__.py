from .employee import Employee
from .employee_data import EmployeeData

__all__ = ['Employee', 'EmployeeData']
