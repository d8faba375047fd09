"""
Parameter bags for the statuses streaming endpoints.

Each bag renders itself into the flat ``name -> str`` mapping that is sent
either as the query string (GET) or the form-encoded body (POST).
"""
from dataclasses import dataclass, field, fields
from typing import Dict, Optional, Sequence, Union

from .enums import Language
from .utils import comma_separated, format_bool

LanguageLike = Union[Language, str]


class StreamingParameters:
    """Shared serialisation for the dataclasses below."""

    def to_params(self) -> Dict[str, str]:
        params = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if value is None:
                continue
            if isinstance(value, bool):
                params[item.name] = format_bool(value)
            elif isinstance(value, (list, tuple, set, frozenset)):
                if value:
                    params[item.name] = comma_separated(value)
            else:
                params[item.name] = str(value)
        return params


@dataclass
class StatusFilters(StreamingParameters):
    follow: Sequence[int] = field(default_factory=tuple)
    track: Sequence[str] = field(default_factory=tuple)
    locations: Sequence[float] = field(default_factory=tuple)
    language: Sequence[LanguageLike] = field(default_factory=tuple)
    stall_warnings: bool = False


@dataclass
class StatusSampleParameters(StreamingParameters):
    language: Sequence[LanguageLike] = field(default_factory=tuple)
    stall_warnings: bool = False


@dataclass
class StatusFirehoseParameters(StreamingParameters):
    language: Sequence[LanguageLike] = field(default_factory=tuple)
    count: Optional[int] = None
    stall_warnings: bool = False
