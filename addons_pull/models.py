"""Core data models shared across addons-pull components."""

import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class UpstreamMeta:
    """Snapshot record of what was pulled from upstream."""

    version: Optional[str]
    commit: str
    languages: List[str]

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        # A manifest without version_name leaves the key out.
        if self.version is not None:
            payload["version"] = self.version
        payload["commit"] = self.commit
        payload["languages"] = list(self.languages)
        return payload


@dataclass
class PullResult:
    """Outcome of one pipeline run."""

    meta: UpstreamMeta
    addons: List[str] = field(default_factory=list)
    contributors_thread: Optional[threading.Thread] = None
