from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Message:
    text: Optional[str]
