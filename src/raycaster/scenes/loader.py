# scenes/loader.py
import json
import os
from typing import Any, Dict, List
from raycaster.core.color import Color
from raycaster.core.vector import Point, Vector3
from raycaster.geometry.element import Element, PLANE, SPHERE
from raycaster.geometry.world import Light, Scene
from raycaster.scenes.presets import LightPresets

def load_scene(path: str) -> Scene:
    """
    Load a scene description from a JSON file.

    Args:
        path: Path to the scene file

    Returns:
        Scene built from the file

    Raises:
        FileNotFoundError: If the scene file doesn't exist
        ValueError: If the file can't be read, isn't valid JSON or doesn't
            describe a scene
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Scene file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Error parsing scene {path}: {str(e)}")
    except OSError as e:
        # Directories and unreadable files
        raise ValueError(f"Error reading scene {path}: {str(e)}")
    return scene_from_dict(data)

def save_scene(scene: Scene, path: str):
    """Write a scene to a JSON file readable by load_scene."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(scene_to_dict(scene), f, indent=2)

def scene_from_dict(data: Dict[str, Any]) -> Scene:
    if not isinstance(data, dict):
        raise ValueError("Scene description must be a JSON object")
    width = _require(data, "width", "scene")
    height = _require(data, "height", "scene")
    fov = _require(data, "fov", "scene")
    if not isinstance(width, int) or not isinstance(height, int):
        raise ValueError(f"Scene width and height must be integers, got {width!r}x{height!r}")

    element_data = data.get("elements", [])
    if not isinstance(element_data, list):
        raise ValueError(f"scene.elements must be a list, got {element_data!r}")
    elements = [_element_from_dict(entry, i) for i, entry in enumerate(element_data)]

    if "light" in data:
        light_data = data["light"]
        if not isinstance(light_data, dict):
            raise ValueError(f"scene.light must be an object, got {light_data!r}")
        light = Light(_vector(_require(light_data, "direction", "light"), "light.direction"),
                      _color(_require(light_data, "color", "light"), "light.color"),
                      _number(light_data.get("intensity", 1.0), "light.intensity"))
    else:
        light = LightPresets.forward()

    return Scene(width, height, _number(fov, "scene.fov"), elements, light)

def scene_to_dict(scene: Scene) -> Dict[str, Any]:
    elements = []
    for element in scene.elements:
        shape = element.shape
        if element.kind == SPHERE:
            elements.append({
                "type": SPHERE,
                "center": [shape.center.x, shape.center.y, shape.center.z],
                "radius": shape.radius,
                "color": _color_list(shape.color),
            })
        elif element.kind == PLANE:
            elements.append({
                "type": PLANE,
                "origin": [shape.origin.x, shape.origin.y, shape.origin.z],
                "normal": [shape.normal.x, shape.normal.y, shape.normal.z],
                "color": _color_list(shape.color),
            })
        else:
            raise TypeError(f"Unsupported shape kind: {element.kind}")

    light = scene.light
    return {
        "width": scene.width,
        "height": scene.height,
        "fov": scene.fov,
        "elements": elements,
        "light": {
            "direction": [light.direction.x, light.direction.y, light.direction.z],
            "color": _color_list(light.color),
            "intensity": light.intensity,
        },
    }

def _element_from_dict(entry: Dict[str, Any], index: int) -> Element:
    where = f"elements[{index}]"
    if not isinstance(entry, dict):
        raise ValueError(f"{where} must be an object")
    kind = _require(entry, "type", where)
    if kind == SPHERE:
        return Element.sphere(_point(_require(entry, "center", where), f"{where}.center"),
                              _number(_require(entry, "radius", where), f"{where}.radius"),
                              _color(_require(entry, "color", where), f"{where}.color"))
    if kind == PLANE:
        return Element.plane(_point(_require(entry, "origin", where), f"{where}.origin"),
                             _vector(_require(entry, "normal", where), f"{where}.normal"),
                             _color(_require(entry, "color", where), f"{where}.color"))
    raise ValueError(f"{where} has unknown type {kind!r}")

def _require(data: Dict[str, Any], key: str, where: str) -> Any:
    if key not in data:
        raise ValueError(f"{where} is missing '{key}'")
    return data[key]

def _number(value: Any, where: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{where} must be a number, got {value!r}")

def _triple(values: List[float], where: str) -> List[float]:
    if not isinstance(values, list) or len(values) != 3:
        raise ValueError(f"{where} must be a list of 3 numbers, got {values!r}")
    try:
        return [float(v) for v in values]
    except (TypeError, ValueError):
        raise ValueError(f"{where} must be a list of 3 numbers, got {values!r}")

def _point(values, where: str) -> Point:
    return Point(*_triple(values, where))

def _vector(values, where: str) -> Vector3:
    return Vector3(*_triple(values, where))

def _color(values, where: str) -> Color:
    return Color(*_triple(values, where))

def _color_list(color: Color) -> List[float]:
    return [color.red, color.green, color.blue]
