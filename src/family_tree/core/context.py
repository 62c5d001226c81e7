from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, TextIO


@dataclass
class TreeContext:
    """
    Shared run context.
    This object is passed between orchestration layers.
    """

    config: Any
    logger: Any

    out: Optional[TextIO] = None

    stats: Dict[str, Any] = field(default_factory=dict)
