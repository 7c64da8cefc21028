import re
from dataclasses import dataclass
from typing import Optional


@dataclass
class DispatchConfig:
    # Pattern compilation
    ignore_case: bool = False
    multiline: bool = False

    # Preparation
    prepare_timeout: Optional[float] = None

    # Logging
    log_level: str = "WARNING"

    @property
    def pattern_flags(self) -> int:
        """Regex flags applied when compiling candidate patterns."""
        flags = 0
        if self.ignore_case:
            flags |= re.IGNORECASE
        if self.multiline:
            flags |= re.MULTILINE
        return flags
