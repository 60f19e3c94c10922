import logging
from typing import Iterable, List, Set

from diagnostics.models import DiagnosticMessage

logger = logging.getLogger(__name__)


class IgnoreFilter:
    """Drops diagnostic messages whose code or type is in the ignore list."""

    def __init__(self, ignore: Iterable[str]):
        """
        Build the filter from the configured ignore entries.

        Args:
            ignore: Diagnostic codes (matched case-insensitively) or type
                names (matched exactly). Non-string entries are skipped.
        """
        self.ignored_codes: Set[str] = set()
        self.ignored_types: Set[str] = set()

        for entry in ignore:
            if not isinstance(entry, str):
                logger.warning(f"Invalid ignore entry type: {type(entry).__name__}, skipping")
                continue
            self.ignored_codes.add(entry.lower())
            self.ignored_types.add(entry)

    def is_wanted(self, message: DiagnosticMessage) -> bool:
        if message.code.lower() in self.ignored_codes:
            return False
        if message.type.value in self.ignored_types:
            return False
        return True

    def apply(self, messages: List[DiagnosticMessage]) -> List[DiagnosticMessage]:
        """
        Filter messages, keeping their original order.

        Args:
            messages: Normalized messages in engine order

        Returns:
            Messages that are not ignored
        """
        if not self.ignored_codes:
            return list(messages)

        kept = [message for message in messages if self.is_wanted(message)]

        dropped = len(messages) - len(kept)
        if dropped:
            logger.debug(f"Ignore filter dropped {dropped} of {len(messages)} message(s)")
        return kept
