
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional

from .keys import key_at


@dataclass(frozen=True)
class StreamState:
    """The whole serializable state of a stream: replaying from it is exact."""

    key: int
    counter: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "StreamState":
        return cls(key=int(payload["key"]), counter=int(payload["counter"]))


@dataclass
class StreamConfig:
    key_index: int = 0
    key: Optional[int] = None  # explicit key wins over key_index
    start_counter: int = 0

    def resolve_key(self) -> int:
        if self.key is not None:
            return self.key
        return key_at(self.key_index)
