"""
Check orchestration.

A run waits for the document to settle, invokes the checking engine,
waits for the engine's completion signal, then normalizes and filters the
engine's findings. Every run ends with exactly one CheckResult: either all
surviving messages or a single error string.
"""
import asyncio
import logging
from typing import Any, Callable, Optional

from diagnostics.engine import BaseEngine
from diagnostics.models import CheckFailure, CheckOptions, CheckResult, CheckSuccess
from diagnostics.pipeline import DiagnosticsPipeline
from diagnostics.types import CheckRun

logger = logging.getLogger(__name__)


class EngineInvocationError(Exception):
    """Raised by CheckRunner when the checking engine fails while being invoked."""

    def __init__(self, engine_name: str, cause: BaseException):
        self.engine_name = engine_name
        self.cause = cause
        super().__init__(f"{engine_name}: {cause}")


class CheckRunner:
    """Runs single-shot checks of documents with one engine."""

    def __init__(self, engine: BaseEngine, pipeline: Optional[DiagnosticsPipeline] = None):
        self.engine = engine
        self.pipeline = pipeline or DiagnosticsPipeline()

    async def run(self, document: Any, options: CheckOptions) -> CheckResult:
        """
        Check a document and return its result.

        Args:
            document: Document handed to the engine untouched
            options: Run configuration

        Returns:
            CheckSuccess with filtered messages in engine order, or
            CheckFailure if the engine raised while being invoked
        """
        run = CheckRun()
        logger.debug(f"Run {run.run_id}: Waiting {options.wait_ms}ms before invoking {self.engine.name}")
        await asyncio.sleep(options.wait_ms / 1000)

        run.start()
        loop = asyncio.get_running_loop()
        engine_done = loop.create_future()

        def resolve() -> None:
            if engine_done.done():
                logger.warning(f"Run {run.run_id}: {self.engine.name} signalled completion more than once, ignoring")
                return
            engine_done.set_result(None)

        def on_engine_complete() -> None:
            # Engines may signal from inside process() or from another thread
            try:
                loop.call_soon_threadsafe(resolve)
            except RuntimeError:
                # Loop already closed, the run has finished
                logger.warning(f"Run {run.run_id}: {self.engine.name} signalled completion more than once, ignoring")

        logger.info(f"Run {run.run_id}: Invoking {self.engine.name} with standard {options.standard}")
        try:
            self._invoke(options.standard, document, on_engine_complete)
        except EngineInvocationError as error:
            logger.error(f"Run {run.run_id}: Engine invocation failed: {error}")
            result = CheckFailure(error=str(error))
            run.complete(result)
            return result

        await engine_done

        raw_findings = self.engine.get_messages()
        logger.debug(f"Run {run.run_id}: {self.engine.name} reported {len(raw_findings)} finding(s)")

        messages = self.pipeline.run(raw_findings, options)
        result = CheckSuccess(messages=messages)
        run.complete(result)

        logger.info(f"Run {run.run_id}: Completed with {len(messages)} message(s)")
        return result

    def _invoke(self, standard: str, document: Any, callback: Callable[[], None]) -> None:
        try:
            self.engine.process(standard, document, callback)
        except Exception as e:
            raise EngineInvocationError(self.engine.name, e) from e

    def schedule(
        self,
        document: Any,
        options: CheckOptions,
        done: Callable[[CheckResult], None]
    ) -> asyncio.Task:
        """
        Start a check on the running event loop and report through a callback.

        Must be called with an event loop running. done() is called exactly
        once. A failure after the engine was invoked (for example while
        retrieving findings) is reported as a CheckFailure in the same
        "<engine name>: <reason>" form as an invocation failure.

        Args:
            document: Document to check
            options: Run configuration
            done: Receives the CheckResult

        Returns:
            The task driving the run
        """
        task = asyncio.get_running_loop().create_task(self.run(document, options))

        def deliver(finished: asyncio.Task) -> None:
            if finished.cancelled():
                logger.warning(f"Check with {self.engine.name} was cancelled by the host, no result delivered")
                return

            error = finished.exception()
            if error is not None:
                logger.error(f"Check with {self.engine.name} failed after invocation: {error}")
                done(CheckFailure(error=f"{self.engine.name}: {error}"))
                return

            done(finished.result())

        task.add_done_callback(deliver)
        return task


def check(engine: BaseEngine, document: Any, options: CheckOptions) -> CheckResult:
    """
    Run one check to completion on a fresh event loop.

    Args:
        engine: Checking engine
        document: Document to check
        options: Run configuration

    Returns:
        The run's CheckResult
    """
    return asyncio.run(CheckRunner(engine).run(document, options))
