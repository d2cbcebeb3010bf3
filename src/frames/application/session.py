"""Interactive session state: current parameters, debounced rebuilds, export.

The session owns the wiring but not the frame: the frame on display
lives in the renderer, which receives each new frame wholesale.
Rebuilds run synchronously and one at a time. Rapid edits are coalesced
by ``request_rebuild``; only the latest parameters are built once the
edits stop for ``debounce_seconds``.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Callable

from frames.domain import DEFAULT_PARAMETERS, Frame, FrameParameters

from .dtos import ExportOutput, FrameInput

if TYPE_CHECKING:
    from frames.contracts import FrameRendererProtocol
    from frames.infrastructure.viewport import CameraPose

    from .commands import ExportFrameCommand, GenerateFrameCommand

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 0.18

RebuildListener = Callable[[Frame, "CameraPose"], None]


class FrameSession:
    """Application state for one interactive editor."""

    def __init__(
        self,
        generate_command: GenerateFrameCommand,
        export_command: ExportFrameCommand,
        renderer: FrameRendererProtocol,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
    ) -> None:
        self.generate_command = generate_command
        self.export_command = export_command
        self.renderer = renderer
        self.debounce_seconds = debounce_seconds
        self._listeners: list[RebuildListener] = []
        # Serializes rebuilds
        self._build_lock = threading.Lock()
        # Guards the pending parameters and timer
        self._state_lock = threading.Lock()
        self._pending: FrameParameters | None = None
        self._timer: threading.Timer | None = None

    @property
    def frame(self) -> Frame | None:
        """The frame currently held by the renderer."""
        return self.renderer.current_frame

    @property
    def has_pending(self) -> bool:
        with self._state_lock:
            return self._pending is not None

    def subscribe(self, listener: RebuildListener) -> None:
        """Call ``listener(frame, camera)`` after every rebuild."""
        self._listeners.append(listener)

    def rebuild(self, params: FrameParameters | FrameInput) -> Frame:
        """Build now and hand the new frame to the renderer."""
        with self._build_lock:
            frame = self.generate_command.execute(params).frame
            camera = self.renderer.show(frame)
        for listener in list(self._listeners):
            listener(frame, camera)
        return frame

    def request_rebuild(self, params: FrameParameters | FrameInput) -> None:
        """Schedule a rebuild; a newer request replaces an older pending one."""
        if isinstance(params, FrameInput):
            params = params.to_parameters()
        with self._state_lock:
            self._pending = params
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.debounce_seconds, self._run_timer)
            self._timer.daemon = True
            self._timer.start()
        logger.debug(f"Rebuild requested, debouncing {self.debounce_seconds}s")

    def flush(self) -> Frame | None:
        """Run a pending rebuild immediately, if there is one."""
        return self._run_pending()

    def cancel_pending(self) -> None:
        with self._state_lock:
            self._take_pending()

    def reset(self) -> Frame:
        """Drop pending edits and rebuild from the default parameters."""
        self.cancel_pending()
        return self.rebuild(DEFAULT_PARAMETERS)

    def export(self, params: FrameParameters | FrameInput) -> ExportOutput:
        """Export pieces for ``params``, independent of the displayed frame."""
        return self.export_command.execute(params)

    def close(self) -> None:
        self.cancel_pending()

    def _take_pending(self) -> FrameParameters | None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        params, self._pending = self._pending, None
        return params

    def _run_pending(self) -> Frame | None:
        with self._state_lock:
            params = self._take_pending()
        if params is None:
            return None
        return self.rebuild(params)

    def _run_timer(self) -> None:
        # Runs on the timer thread; failures are logged, not raised
        try:
            self._run_pending()
        except Exception:
            logger.exception("Debounced rebuild failed")
