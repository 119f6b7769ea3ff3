import logging
from collections.abc import Callable
from typing import Any

from utils.debounce import Scheduler

logger = logging.getLogger(__name__)


class RenderLoop:
    """
    Calls `render` once per frame until stopped.

    When `surface_size` is given it is polled after every frame, and
    `on_resize(width, height)` is called whenever the size differs from the
    previous frame. This is where resize events come from, so `on_resize` is
    usually a Debouncer.
    """

    def __init__(
        self,
        render: Callable[[], None],
        scheduler: Scheduler,
        fps: float = 60.0,
        surface_size: Callable[[], tuple[int, int]] | None = None,
        on_resize: Callable[[int, int], None] | None = None,
    ):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.render = render
        self.scheduler = scheduler
        self.frame_interval = 1.0 / fps
        self.surface_size = surface_size
        self.on_resize = on_resize
        self.frames_rendered = 0
        self._running = False
        self._handle: Any = None
        self._last_size: tuple[int, int] | None = None

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        if self.surface_size is not None:
            self._last_size = self.surface_size()
        logger.info(f"Starting render loop at {1.0 / self.frame_interval:.0f} fps")
        self._handle = self.scheduler.call_later(0.0, self._tick)

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        if self._handle is not None:
            self.scheduler.cancel(self._handle)
            self._handle = None
        logger.info(f"Render loop stopped after {self.frames_rendered} frames")

    def _tick(self) -> None:
        if not self._running:
            return
        # Schedule the next frame first so a failing frame does not end the loop
        self._handle = self.scheduler.call_later(self.frame_interval, self._tick)
        self.render()
        self.frames_rendered += 1
        self._check_resize()

    def _check_resize(self) -> None:
        if self.surface_size is None or self.on_resize is None:
            return
        size = self.surface_size()
        if size != self._last_size:
            self._last_size = size
            self.on_resize(*size)
