from types import MappingProxyType
from typing import Iterable, List, Mapping
import logging

from diagnostics.models import DiagnosticMessage, MessageType
from diagnostics.selector import build_selector
from diagnostics.snippet import build_context
from diagnostics.types import RawFinding

logger = logging.getLogger(__name__)

# Engine severity code -> message type
MESSAGE_TYPE_MAP: Mapping[int, MessageType] = MappingProxyType({
    1: MessageType.ERROR,
    2: MessageType.WARNING,
    3: MessageType.NOTICE,
})


def message_type_for(type_code: int) -> MessageType:
    return MESSAGE_TYPE_MAP.get(type_code, MessageType.UNKNOWN)


class MessageNormalizer:
    """Maps raw engine findings to diagnostic messages."""

    def normalize(self, raw: RawFinding) -> DiagnosticMessage:
        """
        Normalize one raw finding.

        Args:
            raw: Finding as reported by the engine

        Returns:
            Diagnostic message with derived type, context and selector
        """
        message_type = message_type_for(raw.type)
        if message_type is MessageType.UNKNOWN:
            logger.debug(f"Unmapped severity code {raw.type!r} for {raw.code}")

        return DiagnosticMessage(
            code=raw.code,
            message=raw.msg,
            type_code=raw.type,
            type=message_type,
            context=build_context(raw.element),
            selector=build_selector(raw.element),
        )

    def normalize_all(self, raw_findings: Iterable[RawFinding]) -> List[DiagnosticMessage]:
        return [self.normalize(raw) for raw in raw_findings]
