# renderer/preview.py
import numpy as np
import pygame

def buffer_to_surface(buffer: np.ndarray) -> pygame.Surface:
    """
    Convert a (height x width x 4) RGBA buffer to a pygame surface.
    Alpha is dropped; pixels nothing was hit in show as black.
    """
    # surfarray is indexed [x, y]
    rgb = np.ascontiguousarray(buffer[:, :, :3].swapaxes(0, 1))
    return pygame.surfarray.make_surface(rgb)

def show(buffer: np.ndarray, title: str = "Ray Caster"):
    """
    Open a window with the rendered image and block until it is closed
    or Escape is pressed.
    """
    height, width = buffer.shape[:2]
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        screen.blit(buffer_to_surface(buffer), (0, 0))
        pygame.display.flip()

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            clock.tick(30)
    finally:
        pygame.quit()
