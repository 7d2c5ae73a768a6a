import logging
import os
from typing import Any

from flask import Flask
from gcp_microservice_utils import setup_cloud_logging, setup_cloud_trace

from blueprints import BlueprintEmployee, BlueprintHealth
from containers import Container
from repositories.sql import create_tables


class FlaskMicroservice(Flask):
    container: Container


def setup_logging() -> None:
    logging.basicConfig(
        level=os.getenv('LOG_LEVEL', 'INFO').upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )


def create_app(config: dict[str, Any] | None = None) -> FlaskMicroservice:
    if os.getenv('ENABLE_CLOUD_LOGGING') == '1':
        setup_cloud_logging()  # pragma: no cover
    else:
        setup_logging()

    app = FlaskMicroservice(__name__)
    app.container = Container()

    if 'DATABASE_URL' in os.environ:  # pragma: no cover
        app.container.config.db.url.from_env('DATABASE_URL')

    if 'DB_TIMEOUT' in os.environ:  # pragma: no cover
        app.container.config.db.timeout.from_env('DB_TIMEOUT', as_=float)

    if config is not None:
        app.container.config.from_dict(config)

    if os.getenv('ENABLE_CLOUD_TRACE') == '1':  # pragma: no cover
        setup_cloud_trace(app)

    create_tables(app.container.db_engine())

    app.register_blueprint(BlueprintHealth)
    app.register_blueprint(BlueprintEmployee)

    return app
