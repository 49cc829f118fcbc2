from __future__ import annotations

from typing import List, Mapping, Optional, TextIO
import json
import sys

from ..extract.values import Value


def records_to_json(records: List[Mapping[str, Value]], pretty: bool = False) -> str:
    """Serialize records as one JSON array, keeping key order as inserted."""
    if pretty:
        return json.dumps(records, indent=2, ensure_ascii=False)
    return json.dumps(records, separators=(",", ":"), ensure_ascii=False)


def write_records(records: List[Mapping[str, Value]], pretty: bool = False, out: Optional[TextIO] = None) -> None:
    stream = out if out is not None else sys.stdout
    stream.write(records_to_json(records, pretty=pretty))
    stream.write("\n")
    stream.flush()
