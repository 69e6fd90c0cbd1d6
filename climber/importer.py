# Climber CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""importer.py"""
import importlib
from types import ModuleType
from typing import Any, Callable


def resolve_handler(path: str) -> Callable[..., Any]:
    """
    Resolve a dotted path to a command handler.
    Example: 'mypackage.mymodule.myfunction' or 'mypackage.mymodule:myfunction'

    Raises:
        ImportError if the module or function does not exist.
        ValueError if the path is malformed or the attribute is not callable.
    """
    if ":" in path:
        module_path, _, function_name = path.partition(":")
    else:
        module_path, _, function_name = path.rpartition(".")

    if not module_path or not function_name:
        raise ValueError(f"Invalid handler path: '{path}'")

    module: ModuleType = importlib.import_module(module_path)
    try:
        function: Any = getattr(module, function_name)
    except AttributeError as error:
        raise ImportError(
            f"Module '{module_path}' has no attribute '{function_name}'"
        ) from error

    if not callable(function):
        raise ValueError(f"Resolved attribute '{function_name}' is not callable.")

    return function
