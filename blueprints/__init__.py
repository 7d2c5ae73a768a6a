# ruff: noqa: N812

from .employee import blp as BlueprintEmployee
from .health import blp as BlueprintHealth

__all__ = ['BlueprintEmployee', 'BlueprintHealth']
