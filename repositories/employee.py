from models import Employee


class StorageError(Exception):
    pass


class EmployeeRepository:
    def save(self, employee: Employee) -> Employee:
        raise NotImplementedError  # pragma: no cover

    def find_all(self) -> list[Employee]:
        raise NotImplementedError  # pragma: no cover
