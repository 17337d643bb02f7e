"""Weaving pattern templates together with their imports hoisted."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from ..model.pattern import Pattern

_IMPORT_PREFIXES = ("use ", "import ", "from ", "#include")


def _is_import(line: str) -> bool:
    return line.strip().startswith(_IMPORT_PREFIXES)


@dataclass
class WovenResult:
    """Woven code, the patterns it came from and the number of distinct imports."""

    code: str
    patterns_used: list[str] = field(default_factory=list)
    import_count: int = 0


class IntegrationWeaver:
    """Merges templates: deduplicated sorted imports first, then each body."""

    def weave(self, patterns: Sequence[Pattern]) -> WovenResult:
        imports = sorted(
            {
                line.strip()
                for pattern in patterns
                for line in pattern.template.splitlines()
                if _is_import(line)
            }
        )

        header = "".join(f"{imp}\n" for imp in imports)
        if imports:
            header += "\n"

        bodies = [
            "\n".join(
                line for line in pattern.template.splitlines() if not _is_import(line)
            ).strip()
            for pattern in patterns
        ]

        return WovenResult(
            code=header + "\n\n".join(bodies),
            patterns_used=[str(p.id) for p in patterns],
            import_count=len(imports),
        )