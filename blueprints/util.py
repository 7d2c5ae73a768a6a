import json
import logging
from collections.abc import Callable
from typing import Any

import marshmallow
from flask import Blueprint, Response
from flask.views import MethodView
from tightwrap import wraps

from repositories import StorageError

logger = logging.getLogger(__name__)


def class_route(blueprint: Blueprint, rule: str, **options: Any) -> Callable[[type[MethodView]], type[MethodView]]:  # noqa: ANN401
    def decorator(cls: type[MethodView]) -> type[MethodView]:
        blueprint.add_url_rule(rule, view_func=cls.as_view(cls.__name__), **options)
        return cls

    return decorator


def json_response(data: dict[str, Any] | list[dict[str, Any]], status: int) -> Response:
    return Response(json.dumps(data), status=status, mimetype='application/json')


def empty_response(status: int) -> Response:
    return Response(status=status)


def error_response(msg: str, code: int) -> Response:
    return json_response({'message': msg, 'code': code}, code)


def validation_error_response(err: marshmallow.ValidationError) -> Response:
    messages = err.normalized_messages()
    msg = ' '.join(
        f'Invalid value for {field}: {" ".join(map(str, errors)) if isinstance(errors, list) else errors}'
        for field, errors in messages.items()
    )
    return error_response(msg, 400)


def handles_storage_error(f: Callable[..., Response]) -> Callable[..., Response]:
    @wraps(f)
    def decorated_function(*args, **kwargs) -> Response:  # type: ignore[no-untyped-def] # noqa: ANN002, ANN003
        try:
            return f(*args, **kwargs)
        except StorageError:
            logger.warning('Storage error while handling %s', f.__qualname__)
            return empty_response(500)

    return decorated_function
