from dataclasses import dataclass, field

import marshmallow


# Field names on the wire differ from the attribute names, keep data_key in sync with existing clients
@dataclass
class EmployeeData:
    name: str | None = None
    age: int | None = field(default=None, metadata={'validate': marshmallow.validate.Range(min=-(2**31), max=2**31 - 1)})
    national_id: str | None = field(default=None, metadata={'data_key': 'cpf'})
    phone: str | None = field(default=None, metadata={'data_key': 'celullar'})
    job_title: str | None = field(default=None, metadata={'data_key': 'office'})
    department: str | None = field(default=None, metadata={'data_key': 'sector'})
    wage: float | None = None

    class Meta:
        unknown = marshmallow.EXCLUDE
