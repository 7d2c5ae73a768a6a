from .employee import EmployeeRepository, StorageError

__all__ = ['EmployeeRepository', 'StorageError']
