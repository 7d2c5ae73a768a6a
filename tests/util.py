from typing import Any

from faker import Faker


def gen_employee_body(faker: Faker) -> dict[str, Any]:
    return {
        'name': faker.name(),
        'age': faker.pyint(min_value=18, max_value=80),
        'cpf': faker.numerify('###.###.###-##'),
        'celullar': faker.numerify('(##) 9####-####'),
        'office': faker.job(),
        'sector': faker.word(),
        'wage': faker.pyfloat(left_digits=5, right_digits=2, positive=True),
    }
