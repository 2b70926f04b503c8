"""
TaskMonad library for composing deferred async computations.

Nothing runs while a chain is built: unit/map/bind/tap only grow a tree
of expression nodes, and get_result() (or await) walks it.

Architecture:
- TaskMonad - public handle wrapping one expression node
- expr - node variants and the evaluate() interpreter
- Maybe - optional value, bridged with to_task_monad()
- lift - up/down/call helpers
"""

import logging

# Core types
from .monad import TaskMonad, fail, unit
from .maybe import Maybe, to_task_monad

# Expression nodes
from . import expr
from .expr import Expr, evaluate

# Side effects
from .effects import perform_side_effect, tap, tap_async

# Lift helpers
from . import lift

# Errors
from ._errors import AbsentValueError, ComputationError

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("taskmonad").addHandler(logging.NullHandler())

__all__ = (
    # Core types
    "TaskMonad",
    "Maybe",
    "fail",
    "unit",
    "to_task_monad",
    # Expression nodes
    "expr",
    "Expr",
    "evaluate",
    # Side effects
    "perform_side_effect",
    "tap",
    "tap_async",
    # Lift
    "lift",
    # Errors
    "AbsentValueError",
    "ComputationError",
)
