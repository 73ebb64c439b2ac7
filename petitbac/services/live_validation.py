# petitbac/services/live_validation.py
import asyncio
import logging
from typing import Awaitable, Callable, Dict

from petitbac.core.config import settings
from petitbac.models.validation import ValidationOutcome
from petitbac.services.validation_service import ValidationService

logger = logging.getLogger("petitbac.services.live_validation")  # Logger for this module

ResultCallback = Callable[[str, str, ValidationOutcome], Awaitable[None]]

class LiveValidationRunner:
    """
    Per-keystroke validation with "last request wins" semantics.

    Each key (typically one input field) has at most one live task. A newer
    submission cancels the previous one; a result that comes back after being
    superseded is dropped instead of delivered. The blocking pipeline runs in a
    worker thread so the event loop stays responsive.
    """

    def __init__(
        self,
        service: ValidationService,
        on_result: ResultCallback,
        debounce_seconds: float = settings.LIVE_VALIDATION_DEBOUNCE_SECONDS,
    ):
        self.service = service
        self._on_result = on_result
        self.debounce_seconds = debounce_seconds
        # key -> in-flight task; finished tasks remove themselves
        self._tasks: Dict[str, asyncio.Task] = {}

    @property
    def pending_keys(self) -> list[str]:
        return [key for key, task in self._tasks.items() if not task.done()]

    def submit(self, key: str, category: str, word: str) -> asyncio.Task:
        self.cancel(key)
        task = asyncio.create_task(self._run(key, category, word), name=f"live-validation:{key}")
        self._tasks[key] = task
        return task

    def cancel(self, key: str) -> None:
        previous = self._tasks.get(key)
        if previous is not None and not previous.done():
            logger.debug(f"Superseding in-flight validation for '{key}'.")
            previous.cancel()

    async def cancel_all(self) -> None:
        tasks = list(self._tasks.values())
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._tasks.clear()

    async def _run(self, key: str, category: str, word: str) -> ValidationOutcome | None:
        current = asyncio.current_task()
        try:
            if self.debounce_seconds > 0:
                await asyncio.sleep(self.debounce_seconds)
            outcome = await asyncio.to_thread(self.service.validate_word, category, word)
            if self._tasks.get(key) is not current:
                return None
            await self._on_result(key, word, outcome)
            return outcome
        except asyncio.CancelledError:
            logger.debug(f"Live validation of '{word}' for '{key}' cancelled.")
            raise
        except Exception as e:
            # The task is fire-and-forget: nobody awaits it once it leaves _tasks
            logger.exception(f"Live validation of '{word}' for '{key}' failed: {e}")
            return None
        finally:
            if self._tasks.get(key) is current:
                del self._tasks[key]
