"""Load Scene subclasses from a user script."""

import importlib.util
import inspect
import logging
import sys
from pathlib import Path
from types import ModuleType

from .scene import Scene

logger = logging.getLogger(__name__)


class SceneLoadError(Exception):
    """A script could not be imported or has no usable scene."""


def load_module(script_path: str | Path) -> ModuleType:
    """
    Import a Python file as a module.

    Raises:
        SceneLoadError: If the file is missing or fails to import
    """
    path = Path(script_path).resolve()
    if not path.is_file():
        raise SceneLoadError(f"Script '{script_path}' not found")

    module_name = f"anima_script_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise SceneLoadError(f"Cannot import '{script_path}'")
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        sys.modules.pop(module_name, None)
        raise SceneLoadError(f"Failed to import '{script_path}': {e}") from e
    logger.debug("Loaded script %s", path)
    return module


def find_scene_classes(module: ModuleType) -> list[type[Scene]]:
    """Scene subclasses defined in the module itself, in definition order."""
    classes = [
        obj
        for _, obj in inspect.getmembers(module, inspect.isclass)
        if issubclass(obj, Scene) and obj is not Scene and obj.__module__ == module.__name__
    ]
    return sorted(classes, key=lambda cls: inspect.getsourcelines(cls)[1])


def load_scene(script_path: str | Path, scene_name: str | None = None) -> Scene:
    """
    Instantiate and construct one scene from a script.

    Without a name the script must define exactly one scene.

    Raises:
        SceneLoadError: If no matching scene exists or the choice is ambiguous
    """
    classes = find_scene_classes(load_module(script_path))
    if not classes:
        raise SceneLoadError(f"No Scene subclasses found in '{script_path}'")

    if scene_name is not None:
        matches = [cls for cls in classes if cls.__name__ == scene_name]
        if not matches:
            available = ", ".join(cls.__name__ for cls in classes)
            raise SceneLoadError(f"Scene '{scene_name}' not found. Available: {available}")
        scene_class = matches[0]
    elif len(classes) == 1:
        scene_class = classes[0]
    else:
        available = ", ".join(cls.__name__ for cls in classes)
        raise SceneLoadError(f"Multiple scenes found, choose one with --scene: {available}")

    scene = scene_class()
    scene.construct()
    logger.debug(
        "Constructed %s: %d segments, %.2fs",
        scene_class.__name__, len(scene.get_segments()), scene.get_total_duration(),
    )
    return scene
