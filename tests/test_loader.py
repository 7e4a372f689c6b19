import json
import pytest
from raycaster.geometry.element import PLANE, SPHERE
from raycaster.scenes.loader import load_scene, save_scene, scene_from_dict, scene_to_dict
from raycaster.scenes.presets import default_scene

SCENE = {
    "width": 320,
    "height": 240,
    "fov": 60,
    "elements": [
        {"type": "sphere", "center": [1, 0, -5], "radius": 1.0, "color": [0, 1, 0]},
        {"type": "plane", "origin": [0, -1, 0], "normal": [0, -2, 0], "color": [0.5, 0.5, 0.5]},
    ],
    "light": {"direction": [0, 0, -1], "color": [1, 1, 1], "intensity": 20.0},
}


def test_scene_from_dict():
    scene = scene_from_dict(SCENE)
    assert (scene.width, scene.height, scene.fov) == (320, 240, 60.0)
    assert [e.kind for e in scene.elements] == [SPHERE, PLANE]
    sphere = scene.elements[0].shape
    assert (sphere.center.x, sphere.center.y, sphere.center.z) == (1.0, 0.0, -5.0)
    assert sphere.color.green == 1.0
    plane = scene.elements[1].shape
    assert plane.normal.y == pytest.approx(-1.0)
    assert scene.light.intensity == 20.0


def test_light_is_optional():
    data = dict(SCENE)
    del data["light"]
    scene = scene_from_dict(data)
    assert scene.light.direction.length() == pytest.approx(1.0)


def test_save_and_load_scene(tmp_path):
    path = str(tmp_path / "scene.json")
    save_scene(default_scene(), path)
    loaded = load_scene(path)
    assert scene_to_dict(loaded) == scene_to_dict(default_scene())


def test_load_scene_file(tmp_path):
    path = tmp_path / "scene.json"
    path.write_text(json.dumps(SCENE))
    scene = load_scene(str(path))
    assert len(scene.elements) == 2


def test_missing_scene_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_scene(str(tmp_path / "nope.json"))


def test_scene_path_is_a_directory(tmp_path):
    with pytest.raises(ValueError):
        load_scene(str(tmp_path))


def test_malformed_scene_file(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{ not json")
    with pytest.raises(ValueError):
        load_scene(str(path))


@pytest.mark.parametrize("mutate", [
    lambda d: d.pop("width"),
    lambda d: d.update(width=320.5),
    lambda d: d.update(fov=200),
    lambda d: d.update(fov=None),
    lambda d: d.update(fov="wide"),
    lambda d: d.update(elements=5),
    lambda d: d.update(light=5),
    lambda d: d["light"].update(intensity=None),
    lambda d: d["elements"].append({"type": "sphere", "center": [0, 0, -1], "radius": None, "color": [1, 1, 1]}),
    lambda d: d["elements"].append({"type": "cube", "center": [0, 0, 0]}),
    lambda d: d["elements"].append({"type": "sphere", "center": [0, 0], "radius": 1, "color": [1, 1, 1]}),
    lambda d: d["elements"].append({"type": "sphere", "center": [0, 0, -1], "radius": 0, "color": [1, 1, 1]}),
    lambda d: d["elements"].append({"type": "plane", "origin": [0, 0, 0], "color": [1, 1, 1]}),
    lambda d: d["elements"].append({"type": "plane", "origin": [0, 0, 0], "normal": [0, 0, 0], "color": [1, 1, 1]}),
])
def test_invalid_scene_descriptions(mutate):
    data = json.loads(json.dumps(SCENE))
    mutate(data)
    with pytest.raises(ValueError):
        scene_from_dict(data)


def test_scene_must_be_an_object():
    with pytest.raises(ValueError):
        scene_from_dict([1, 2, 3])
