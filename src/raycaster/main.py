# main.py
import argparse
import sys
import time
from dataclasses import dataclass
from typing import List, Optional
from raycaster.geometry.world import Scene
from raycaster.renderer.image_io import save_image
from raycaster.renderer.raytracer import render
from raycaster.scenes.loader import load_scene
from raycaster.scenes.presets import default_scene

@dataclass
class RenderSettings:
    width: Optional[int] = None
    height: Optional[int] = None
    fov: Optional[float] = None
    scene_path: Optional[str] = None
    output: str = "render.png"
    parallel: bool = False
    show: bool = False
    quiet: bool = False

def parse_args(argv: Optional[List[str]] = None) -> RenderSettings:
    parser = argparse.ArgumentParser(prog="raycaster",
                                     description="Render a scene of spheres and planes by ray casting.")
    parser.add_argument("--scene", dest="scene_path", help="JSON scene file (default: built-in scene)")
    parser.add_argument("--width", type=int, help="Image width, overrides the scene's")
    parser.add_argument("--height", type=int, help="Image height, overrides the scene's")
    parser.add_argument("--fov", type=float, help="Vertical field of view in degrees, overrides the scene's")
    parser.add_argument("--output", default="render.png", help="Output image file")
    parser.add_argument("--parallel", action="store_true", help="Render with the multi-threaded kernel")
    parser.add_argument("--show", action="store_true", help="Preview the result in a window")
    parser.add_argument("--quiet", action="store_true", help="Only report errors")
    args = parser.parse_args(argv)
    return RenderSettings(**vars(args))

def build_scene(settings: RenderSettings) -> Scene:
    """Load or build the scene, then apply size and fov overrides."""
    if settings.scene_path:
        scene = load_scene(settings.scene_path)
    else:
        scene = default_scene()
    if settings.width is None and settings.height is None and settings.fov is None:
        return scene
    return Scene(settings.width if settings.width is not None else scene.width,
                 settings.height if settings.height is not None else scene.height,
                 settings.fov if settings.fov is not None else scene.fov,
                 scene.elements, scene.light)

def run(settings: RenderSettings) -> int:
    def log(message: str):
        if not settings.quiet:
            print(message)

    try:
        scene = build_scene(settings)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading scene: {e}", file=sys.stderr)
        return 1

    if scene.width <= scene.height:
        print(f"Error: scene must be wider than it is tall, got {scene.width}x{scene.height}",
              file=sys.stderr)
        return 1

    log("\n=== Rendering Scene ===")
    log(f"Source: {settings.scene_path or 'built-in default scene'}")
    log(f"Resolution: {scene.width}x{scene.height}, fov: {scene.fov}")
    for element in scene.elements:
        log(f"  {element.shape}")
    log(f"Mode: {'parallel' if settings.parallel else 'single-threaded'}")

    start = time.perf_counter()
    if settings.parallel:
        # Imported lazily, the kernel pulls in numba
        from raycaster.renderer.kernels import render_parallel
        buffer = render_parallel(scene)
    else:
        buffer = render(scene)
    log(f"Rendered in {time.perf_counter() - start:.2f}s")

    try:
        save_image(buffer, settings.output)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    log(f"Saved image to {settings.output}")

    if settings.show:
        from raycaster.renderer.preview import show
        show(buffer)
    return 0

def main(argv: Optional[List[str]] = None) -> int:
    return run(parse_args(argv))

if __name__ == "__main__":
    sys.exit(main())
