"""Finding and filling marked gaps in composed code."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

_GAP = re.compile(r"/\* GAP: (.*?) \*/")


class GapType(Enum):
    """Kind of glue a gap needs."""

    TYPE_CONVERSION = "type_conversion"
    ERROR_HANDLING = "error_handling"
    INITIALIZATION = "initialization"
    MISSING = "missing"


@dataclass
class GapDescription:
    """A gap marked in code as ``/* GAP: description */``."""

    index: int
    description: str
    gap_type: GapType = GapType.MISSING
    context_before: str = ""
    context_after: str = ""


def _filler(gap: GapDescription) -> str:
    desc = gap.description
    if gap.gap_type is GapType.TYPE_CONVERSION:
        return f"// TODO: Convert type for {desc}"
    if gap.gap_type is GapType.ERROR_HANDLING:
        return f'// Error handling for {desc}\nreturn Err("unimplemented".into());'
    if gap.gap_type is GapType.INITIALIZATION:
        ident = desc.lower().replace(" ", "_")
        return f"// Initialize {desc}\nlet {ident} = Default::default();"
    return f"// TODO: Implement {desc}"


class GapFiller:
    """Replaces gap markers with glue code suited to each gap's type."""

    def fill_gaps(self, code: str, gaps: Iterable[GapDescription]) -> str:
        """Replace every marker of each gap with its filler."""
        result = code
        for gap in gaps:
            result = result.replace(f"/* GAP: {gap.description} */", _filler(gap))
        return result

    def identify_gaps(self, code: str) -> list[GapDescription]:
        """Every gap marker in ``code``, in order, typed as missing."""
        return [
            GapDescription(index=i, description=m.group(1))
            for i, m in enumerate(_GAP.finditer(code))
        ]