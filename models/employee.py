from dataclasses import dataclass


@dataclass
class Employee:
    id: int | None
    name: str | None
    age: int | None
    national_id: str | None
    phone: str | None
    job_title: str | None
    department: str | None
    wage: float | None
