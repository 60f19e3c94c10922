from typing import List, Iterable, Optional
import logging
from diagnostics.types import RawFinding
from diagnostics.models import CheckOptions, DiagnosticMessage
from diagnostics.normalizer import MessageNormalizer
from diagnostics.ignore_filter import IgnoreFilter

logger = logging.getLogger(__name__)


class DiagnosticsPipeline:
    """Turns raw engine findings into the filtered list of diagnostic messages."""

    def __init__(self, normalizer: Optional[MessageNormalizer] = None):
        """Initialize the diagnostics pipeline."""
        self.normalizer = normalizer or MessageNormalizer()

    def run(self, raw_findings: Iterable[RawFinding], options: CheckOptions) -> List[DiagnosticMessage]:
        """
        Normalize and filter raw findings.

        Every finding is normalized before any is filtered, so the filter
        sees complete messages. Filtering never reorders.

        Args:
            raw_findings: Findings in the order the engine reported them
            options: Run configuration supplying the ignore list

        Returns:
            Diagnostic messages that survived the ignore filter
        """
        messages = self.normalizer.normalize_all(raw_findings)
        kept = IgnoreFilter(options.ignore).apply(messages)

        logger.debug(
            f"Pipeline processed {len(messages)} finding(s): "
            f"{len(kept)} kept, {len(messages) - len(kept)} ignored"
        )
        return kept
