"""Callable protocol for requireflow."""

from requireflow.callable.execute import execute
from requireflow.callable.result import CallableResult

__all__ = ["CallableResult", "execute"]
