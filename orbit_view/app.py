from __future__ import annotations

import logging
from dataclasses import dataclass
from math import degrees

import pygame

from orbit_view.core.convert import wrap_angle
from orbit_view.render.camera import CameraFrame
from orbit_view.render.orbit import OrbitalCameraController, OrbitParams, PointerInput
from orbit_view.render.scene import reference_scene

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppParams:
    title: str = "Maths 3D - orbital camera"
    width: int = 1920
    height: int = 1080
    size_coef: float = 0.9
    fps: int = 60
    fov_deg: float = 45.0
    near: float = 0.1
    log_level: str = "INFO"

    @property
    def window_size(self) -> tuple[int, int]:
        return (int(self.width * self.size_coef), int(self.height * self.size_coef))


def run(params: AppParams | None = None, orbit: OrbitParams | None = None) -> None:
    params = params if params is not None else AppParams()
    logging.basicConfig(
        level=params.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    pygame.display.set_caption(params.title)

    screen = pygame.display.set_mode(params.window_size, pygame.RESIZABLE)
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(None, 18)
    logger.info("window %dx%d opened", *screen.get_size())

    controller = OrbitalCameraController(orbit)
    segments, markers = reference_scene()

    bg = (245, 245, 245)
    hud_col = (40, 40, 40)

    running = True
    while running:
        # Seconds since the previous tick.
        dt = clock.get_time() / 1000.0
        scroll = 0.0
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    controller.reset()
                    logger.info("orbit reset")
            elif event.type == pygame.MOUSEWHEEL:
                scroll += event.y

        mx, my = pygame.mouse.get_pos()
        # Right button orbits, like the usual 3D viewers.
        held = pygame.mouse.get_pressed()[2]
        eye = controller.step(
            PointerInput(pointer=(float(mx), float(my)), scroll=scroll, orbit_held=held),
            dt,
        )

        w, h = screen.get_size()
        frame = CameraFrame.look_at(
            eye,
            controller.target,
            controller.up,
            (w, h),
            fov_deg=params.fov_deg,
            near=params.near,
        )

        screen.fill(bg)

        for seg in segments:
            s0 = frame.project(seg.a)
            s1 = frame.project(seg.b)
            if s0 is None or s1 is None:
                continue
            pygame.draw.aaline(screen, seg.color, (s0[0], s0[1]), (s1[0], s1[1]))

        # Far to near so closer markers overdraw.
        projected = []
        for m in markers:
            s = frame.project(m.center)
            if s is not None:
                projected.append((s, m))
        projected.sort(key=lambda item: item[0][2], reverse=True)
        for s, m in projected:
            r = max(1, int(frame.project_radius(m.radius, s[2])))
            pygame.draw.circle(screen, m.color, (int(s[0]), int(s[1])), r)

        pos = controller.state.position
        hud_lines = [
            f"rho: {pos.rho:0.2f}",
            f"theta: {degrees(wrap_angle(pos.theta)):0.1f} deg",
            f"phi: {degrees(pos.phi):0.1f} deg",
            "controls: drag RMB orbit, wheel zoom, R reset, Esc quit",
            f"fps: {clock.get_fps():0.1f}",
        ]
        y = 10
        for line in hud_lines:
            surf = font.render(line, True, hud_col)
            screen.blit(surf, (10, y))
            y += 18

        pygame.display.flip()
        clock.tick(params.fps)

    logger.info("shutting down")
    pygame.quit()


if __name__ == "__main__":
    run()
