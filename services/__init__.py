from .employee import EmployeeService

__all__ = ['EmployeeService']
