# renderer/preview.py
import numpy as np
import pygame

def show_image(pixels: np.ndarray, caption: str = "Path Tracer"):
    """
    Display a finished (height, width, 3) uint8 image in a window until the
    window is closed or Escape is pressed.
    """
    pygame.init()
    try:
        height, width = pixels.shape[0], pixels.shape[1]
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(caption)
        # surfarray indexes pixels as [x, y]
        surface = pygame.surfarray.make_surface(np.transpose(pixels, (1, 0, 2)))
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            screen.blit(surface, (0, 0))
            pygame.display.flip()
            clock.tick(30)
    finally:
        pygame.quit()
