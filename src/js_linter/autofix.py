import logging
from typing import Iterable, List

from .models import Fix, InternalIssue

logger = logging.getLogger(__name__)


class AutoFixEngine:
    """Applies the byte-range fixes attached to issues"""

    def collect_fixes(self, issues: Iterable[InternalIssue]) -> List[Fix]:
        return [issue.fix for issue in issues if issue.fix is not None]

    def apply_fixes(self, source: str | bytes, issues: Iterable[InternalIssue]) -> str:
        """Applies non-overlapping fixes in a single pass.

        A fix touching or overlapping one already applied is skipped; the
        next lint pass reports it again.
        """
        data = source.encode("utf-8") if isinstance(source, str) else source
        fixes = sorted(self.collect_fixes(issues), key=lambda f: (f.start_byte, f.end_byte))
        result = []
        last_offset = -1
        skipped = 0
        for fix in fixes:
            if fix.start_byte <= last_offset or fix.start_byte > fix.end_byte:
                skipped += 1
                continue
            result.append(data[max(last_offset, 0) : fix.start_byte])
            result.append(fix.text.encode("utf-8"))
            last_offset = fix.end_byte
        result.append(data[max(last_offset, 0) :])
        if skipped:
            logger.debug("Skipped %d overlapping fix(es)", skipped)
        return b"".join(result).decode("utf-8")
