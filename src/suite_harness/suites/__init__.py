"""Suite abstraction."""

from .base import Suite, call_guarded
from .declarative import FunctionSuite, define_suite

__all__ = ["Suite", "FunctionSuite", "call_guarded", "define_suite"]
