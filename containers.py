from dependency_injector import containers, providers

from repositories.sql import SqlEmployeeRepository, create_db_engine
from services import EmployeeService


class Container(containers.DeclarativeContainer):
    wiring_config = containers.WiringConfiguration(packages=['blueprints'])

    config = providers.Configuration(default={'db': {'url': 'sqlite:///employees.db', 'timeout': None}})

    db_engine = providers.Singleton(create_db_engine, url=config.db.url, timeout=config.db.timeout)

    employee_repo = providers.ThreadSafeSingleton(SqlEmployeeRepository, engine=db_engine)

    employee_service = providers.Factory(EmployeeService, employee_repo=employee_repo)
