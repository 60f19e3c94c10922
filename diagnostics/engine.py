from abc import ABC, abstractmethod
from typing import Any, Callable, List

from diagnostics.types import RawFinding


class BaseEngine(ABC):
    """
    Abstract base class for checking engines.

    An engine is driven in two steps: process() starts a check and calls
    the callback with no arguments once results are ready (synchronously,
    later on the event loop, or from another thread), then get_messages()
    returns the findings. process() may raise instead.
    """

    # Prefix for error payloads, e.g. "HTML CodeSniffer: <reason>"
    name: str = "Checking engine"

    @abstractmethod
    def process(self, standard: str, document: Any, callback: Callable[[], None]) -> None:
        """
        Start checking a document.

        Args:
            standard: Ruleset / profile to apply
            document: Document to check, read-only
            callback: Called once results can be retrieved
        """
        pass

    @abstractmethod
    def get_messages(self) -> List[RawFinding]:
        """
        Return the findings of the last check, in report order.
        """
        pass
