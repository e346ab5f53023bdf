"""
Utility decorators for input validation on fixed-point methods.
"""

import functools
import inspect
from collections.abc import Callable
from typing import Any, TypeVar

from fixeddec.core.exceptions.numeric import PrecisionMismatchError, ValidationError
from fixeddec.core.utils.validation import validate_non_negative

DIGIT_COUNT_PARAMS = ("precision",)
SCALAR_PARAMS = ("rhs",)
OPERAND_PARAMS = ("other",)

F = TypeVar("F", bound=Callable[..., Any])


def _validate_parameter(owner: Any, param_name: str, value: Any, bound_args: Any) -> None:
    """Validate a single method parameter against the owning value's type."""
    if param_name in DIGIT_COUNT_PARAMS:
        bound_args.arguments[param_name] = validate_non_negative(value, param_name)

    elif param_name in SCALAR_PARAMS:
        bound_args.arguments[param_name] = owner.kind.coerce(value, param_name)

    elif param_name in OPERAND_PARAMS and type(value) is not type(owner):
        raise PrecisionMismatchError(type(owner).__name__, type(value).__name__)


def validate_inputs(func: F) -> F:
    """Decorator to validate digit counts, scalar operands and same-typed operands.

    Parameters are recognised by name: ``precision`` must be a non-negative
    int, ``rhs`` must be an int of the owner's backing kind and ``other``
    must be a value of exactly the owner's type.
    """
    sig = inspect.signature(func)

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        bound_args = sig.bind(*args, **kwargs)
        bound_args.apply_defaults()
        owner = bound_args.arguments.get("self")

        for param_name, value in bound_args.arguments.items():
            if param_name != "self":
                try:
                    _validate_parameter(owner, param_name, value, bound_args)
                except PrecisionMismatchError:
                    raise
                except (TypeError, ValueError) as e:
                    raise ValidationError(f"Invalid {param_name}: {e}") from e

        return func(*bound_args.args, **bound_args.kwargs)

    return wrapper  # type: ignore
