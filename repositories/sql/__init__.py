from .base import create_db_engine, create_tables
from .employee import SqlEmployeeRepository

__all__ = ['SqlEmployeeRepository', 'create_db_engine', 'create_tables']
