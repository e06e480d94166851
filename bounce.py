"""
Sling-bounce: one particle bouncing inside a circle.

Controls:
 - Drag the particle with the left mouse button, let go to fling it
   (it flies opposite to the drag, like a sling-shot)
 - Buttons: Increase Gravity / Decrease Gravity (0.1 per click), Reset Size
 - Up / Down: increase / decrease gravity
 - R: reset size
 - Space: pause / resume
 - N: step once while paused
 - Esc / Close window: quit
Notes:
 - Units are pixels per tick. A tick is about 0.03 seconds.
 - The particle grows 2 px on every bounce and never shrinks on its own.
"""

import sys
try:
    import pygame
except ImportError:
    print("pygame is required to run this simulation. Install with: pip install pygame")
    sys.exit(1)

from particle import (
    BOUNDARY_CENTER,
    BOUNDARY_RADIUS,
    Particle,
    acceleration_readout,
)

# Constants and configuration
WIDTH, HEIGHT = 500, 550
TICK_MS = 30
FPS = 1000 // TICK_MS

START_GRAVITY = 0.2
GRAVITY_STEP = 0.1

BG_COLOR = (255, 255, 255)
BOUNDARY_COLOR = (0, 0, 0)
PARTICLE_COLOR = (255, 0, 0)
SLING_COLOR = (0, 0, 255)
TEXT_COLOR = (0, 0, 0)
BUTTON_COLOR = (230, 230, 230)
BUTTON_BORDER = (120, 120, 120)

INCREASE_RECT = (350, 420, 130, 30)
DECREASE_RECT = (350, 460, 130, 30)
RESET_RECT = (350, 500, 130, 30)


class Button:
    def __init__(self, rect, label, action):
        self.rect = pygame.Rect(rect)
        self.label = label
        self.action = action

    def hit(self, pos):
        return self.rect.collidepoint(pos)

    def draw(self, surf, font):
        pygame.draw.rect(surf, BUTTON_COLOR, self.rect, border_radius=4)
        pygame.draw.rect(surf, BUTTON_BORDER, self.rect, 1, border_radius=4)
        text = font.render(self.label, True, TEXT_COLOR)
        surf.blit(text, text.get_rect(center=self.rect.center))


class BounceSim:
    def __init__(self, width=WIDTH, height=HEIGHT):
        pygame.init()
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Particle Game")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("consolas", 14)
        self.button_font = pygame.font.SysFont("consolas", 13)

        self.particle = Particle(*BOUNDARY_CENTER)
        self.gravity = START_GRAVITY
        self.bounces = 0
        self.running = True
        self.paused = False

        # a left press that landed on a button; its motion and release
        # belong to the button, not to the particle
        self.captured = False

        self.buttons = [
            Button(INCREASE_RECT, "Increase Gravity", self.increase_gravity),
            Button(DECREASE_RECT, "Decrease Gravity", self.decrease_gravity),
            Button(RESET_RECT, "Reset Size", self.reset_size),
        ]

    def increase_gravity(self):
        self.gravity += GRAVITY_STEP

    def decrease_gravity(self):
        self.gravity -= GRAVITY_STEP

    def reset_size(self):
        self.particle.reset_size()

    def step(self):
        if self.particle.update(self.gravity):
            self.bounces += 1

    def tick(self):
        if not self.paused:
            self.step()

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key == pygame.K_SPACE:
                self.paused = not self.paused
            elif event.key == pygame.K_UP:
                self.increase_gravity()
            elif event.key == pygame.K_DOWN:
                self.decrease_gravity()
            elif event.key == pygame.K_r:
                self.reset_size()
            elif event.key == pygame.K_n:  # single-step when paused
                if self.paused:
                    self.step()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            # a press always starts fresh, even if the last release never arrived
            self.captured = False
            for button in self.buttons:
                if button.hit(event.pos):
                    button.action()
                    self.captured = True
                    break
        elif event.type == pygame.MOUSEMOTION:
            if event.buttons[0] and not self.captured:
                self.particle.drag_to(*event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            if self.captured:
                self.captured = False
            else:
                self.particle.release_at(*event.pos)

    def hud_lines(self):
        vx, vy = self.particle.readout()
        _, ay = acceleration_readout(self.gravity)
        lines = [
            f"Velocity: ({vx}, {vy})",
            f"Acceleration: (0, {ay})",
            "Units are pixels per tick.",
            "A tick here is about 0.03 seconds.",
            f"Bounces: {self.bounces}   Size: {self.particle.size}",
        ]
        if self.paused:
            lines.append("PAUSED (Space: resume, N: step)")
        return lines

    def draw_hud(self):
        x, y = 10, 420
        for line in self.hud_lines():
            surf = self.font.render(line, True, TEXT_COLOR)
            self.screen.blit(surf, (x, y))
            y += 18

    def draw(self):
        self.screen.fill(BG_COLOR)

        cx, cy = BOUNDARY_CENTER
        pygame.draw.circle(self.screen, BOUNDARY_COLOR, (cx, cy), BOUNDARY_RADIUS, 1)

        p = self.particle
        half = p.size / 2.0
        pygame.draw.ellipse(self.screen, PARTICLE_COLOR,
                            pygame.Rect(round(p.x - half), round(p.y - half), p.size, p.size))
        if p.drag_anchor is not None:
            pygame.draw.line(self.screen, SLING_COLOR, p.drag_anchor, p.position, 3)

        self.draw_hud()
        for button in self.buttons:
            button.draw(self.screen, self.button_font)

        pygame.display.flip()

    def run(self):
        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)
            self.tick()
            self.draw()
            self.clock.tick(FPS)

        pygame.quit()


def main():
    sim = BounceSim()
    sim.run()


# Entry point
if __name__ == "__main__":
    main()
