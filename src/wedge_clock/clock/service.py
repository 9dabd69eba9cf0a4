"""Clock Service daemon."""

import time
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from wedge_clock.clock.renderer import ClockRenderer
from wedge_clock.config import Settings, get_settings
from wedge_clock.logging.config import get_logger

logger = get_logger(__name__)


class ClockService:
    """Service that redraws the clock SVG on a fixed interval."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        output_path: Optional[Path] = None,
        clock: Callable[[], datetime] = datetime.now,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize clock service.

        Args:
            settings: Settings to use instead of the global ones
            output_path: Where to write the SVG (defaults to settings)
            clock: Source of the current time
            sleep: Sleep function used between redraws
        """
        self.settings = settings or get_settings()
        self.renderer = ClockRenderer(settings=self.settings)
        self.output_path = Path(output_path or self.settings.output_path)
        self._clock = clock
        self._sleep = sleep

    def run_daemon(self, max_iterations: Optional[int] = None) -> None:
        """
        Run the clock service loop.

        Args:
            max_iterations: Stop after this many redraws (runs forever if None)
        """
        logger.info(f"Clock service started, outputting to {self.output_path}")

        iterations = 0
        try:
            while max_iterations is None or iterations < max_iterations:
                iterations += 1
                try:
                    self.update_clock()
                except Exception as e:
                    logger.error(f"Error in clock service: {e}")
                    self._sleep(self.settings.error_backoff)
                    continue

                self._sleep(self._delay_until_next_tick())

        except KeyboardInterrupt:
            logger.info("Clock service stopped")

    def _delay_until_next_tick(self) -> float:
        """Seconds until the next whole update interval."""
        interval = self.settings.update_interval
        now = self._clock().timestamp()
        return interval - (now % interval)

    def update_clock(self) -> None:
        """Generate and save updated clock SVG."""
        now = self._clock()
        svg_content = self.renderer.render(now)

        # Atomic write
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.output_path.with_suffix(".tmp")
        with open(temp_path, "w", encoding="utf-8") as f:
            f.write(svg_content)

        temp_path.replace(self.output_path)
        logger.debug(f"Clock updated for {now:%H:%M:%S}")
