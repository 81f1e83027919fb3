from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Union

from ..common.datetime_utils import try_parse_clock_time
from ..core.enums import PunchType
from .model import Punch

PunchLike = Union[Punch, Mapping[str, Any]]


def _normalize(punch: PunchLike) -> Optional[Punch]:
    if isinstance(punch, Punch):
        return punch if try_parse_clock_time(punch.time) is not None else None
    try:
        kind = PunchType(str(punch.get("type") or punch.get("kind") or "").upper())
    except ValueError:
        return None
    raw = punch.get("time")
    if try_parse_clock_time(raw) is None:
        return None
    return Punch(time=str(raw).strip(), kind=kind)


def first_in_last_out(punches: Optional[Iterable[PunchLike]]) -> tuple[Optional[str], Optional[str]]:
    """Fold a day's biometric punches into (earliest IN, latest OUT).

    Punches with an unknown type or an unparsable time are ignored.
    """
    if not punches:
        return None, None

    ins: list[Punch] = []
    outs: list[Punch] = []
    for raw in punches:
        punch = _normalize(raw)
        if punch is None:
            continue
        (ins if punch.kind == PunchType.IN else outs).append(punch)

    def _key(p: Punch):
        return try_parse_clock_time(p.time)

    first_in = min(ins, key=_key).time if ins else None
    last_out = max(outs, key=_key).time if outs else None
    return first_in, last_out
