"""Ready-made actions for Finder.set_action()."""

import inspect
from collections.abc import Callable
from types import ModuleType

from pkgscan.exceptions import ActionError

INITIALIZER_NAME = "setup"


def call_initializer(module: ModuleType, name: str = INITIALIZER_NAME) -> object:
    """Call a module's zero-argument initializer.

    Looks up name first, then its private spelling (_name), so private
    initializers are found as well.

    Args:
        module: Module to initialize
        name: Public name of the initializer

    Returns:
        Whatever the initializer returns

    Raises:
        ActionError: If no initializer exists, it requires arguments, or it
            raises
    """
    initializer = _find_initializer(module, name)
    try:
        return initializer()
    except Exception as e:
        raise ActionError(module.__name__, e) from e


def _find_initializer(module: ModuleType, name: str) -> Callable[[], object]:
    for candidate in (name, f"_{name}"):
        initializer = getattr(module, candidate, None)
        if callable(initializer):
            break
    else:
        raise ActionError(
            module.__name__, AttributeError(f"no callable '{name}' or '_{name}'")
        )

    try:
        inspect.signature(initializer).bind()
    except TypeError as e:
        raise ActionError(module.__name__, e) from e
    except ValueError:
        # No signature available (some builtins); let the call decide
        pass
    return initializer


CALL_INITIALIZER = call_initializer
