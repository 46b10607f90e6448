from dataclasses import dataclass, asdict
from typing import Dict


@dataclass(frozen=True)
class Notice:
    """User-facing notification produced by a state transition."""
    title: str
    description: str
    variant: str = "default"  # default | warning | destructive

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
