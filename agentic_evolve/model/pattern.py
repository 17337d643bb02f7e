"""Pattern data model: languages, signatures, variables and stored patterns."""

from __future__ import annotations

import hashlib
import time
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, ClassVar

from .errors import SerializationError
from .ids import PatternId

_ALIASES = {
    "rust": "rust",
    "rs": "rust",
    "python": "python",
    "py": "python",
    "typescript": "typescript",
    "ts": "typescript",
    "javascript": "javascript",
    "js": "javascript",
    "go": "go",
    "java": "java",
    "csharp": "csharp",
    "c#": "csharp",
    "cs": "csharp",
    "cpp": "cpp",
    "c++": "cpp",
    "c": "c",
    "shell": "shell",
    "bash": "shell",
    "sh": "shell",
    "zsh": "shell",
}
# Languages also commonly written with a "lang" suffix.
_ALIASES.update({f"{name}lang": name for name in ("go",)})
_KNOWN = frozenset(_ALIASES.values())


@dataclass(frozen=True)
class Language:
    """Programming language of a pattern, identified by its canonical name."""

    name: str

    RUST: ClassVar[Language]
    PYTHON: ClassVar[Language]
    TYPESCRIPT: ClassVar[Language]
    JAVASCRIPT: ClassVar[Language]
    GO: ClassVar[Language]
    JAVA: ClassVar[Language]
    CSHARP: ClassVar[Language]
    CPP: ClassVar[Language]
    C: ClassVar[Language]
    SHELL: ClassVar[Language]

    @classmethod
    def from_name(cls, name: str) -> Language:
        """Resolve a language name or common alias, case-insensitively."""
        key = name.lower()
        return cls(_ALIASES.get(key, key))

    @property
    def is_other(self) -> bool:
        """True for a language outside the known set."""
        return self.name not in _KNOWN

    def __str__(self) -> str:
        return self.name


Language.RUST = Language("rust")
Language.PYTHON = Language("python")
Language.TYPESCRIPT = Language("typescript")
Language.JAVASCRIPT = Language("javascript")
Language.GO = Language("go")
Language.JAVA = Language("java")
Language.CSHARP = Language("csharp")
Language.CPP = Language("cpp")
Language.C = Language("c")
Language.SHELL = Language("shell")


class Visibility(Enum):
    """Visibility of a function."""

    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"
    INTERNAL = "internal"


@dataclass
class ParamSignature:
    """A parameter in a function signature."""

    name: str
    param_type: str
    is_optional: bool = False


@dataclass
class FunctionSignature:
    """Function signature used for pattern matching."""

    name: str
    language: Language
    params: list[ParamSignature] = field(default_factory=list)
    return_type: str | None = None
    is_async: bool = False
    visibility: Visibility = Visibility.PUBLIC

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "params": [asdict(p) for p in self.params],
            "return_type": self.return_type,
            "language": self.language.name,
            "is_async": self.is_async,
            "visibility": self.visibility.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FunctionSignature:
        try:
            return cls(
                name=data["name"],
                language=Language(data["language"]),
                params=[ParamSignature(**p) for p in data["params"]],
                return_type=data.get("return_type"),
                is_async=data["is_async"],
                visibility=Visibility(data["visibility"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise SerializationError(f"invalid signature: {exc}") from exc


@dataclass
class PatternVariable:
    """A variable element in a pattern template."""

    name: str
    var_type: str
    pattern: str | None = None
    default: str | None = None


def _content_hash(template: str) -> str:
    return hashlib.blake2b(template.encode("utf-8"), digest_size=32).hexdigest()


@dataclass
class Pattern:
    """A stored, reusable code pattern."""

    id: PatternId
    name: str
    domain: str
    language: Language
    signature: FunctionSignature
    template: str
    variables: list[PatternVariable] = field(default_factory=list)
    confidence: float = 0.0
    usage_count: int = 0
    success_count: int = 0
    version: int = 1
    tags: list[str] = field(default_factory=list)
    created_at: int = 0
    updated_at: int = 0
    last_used: int = 0
    content_hash: str = ""

    @classmethod
    def create(
        cls,
        name: str,
        domain: str,
        language: Language,
        signature: FunctionSignature,
        template: str,
        variables: list[PatternVariable],
        confidence: float,
    ) -> Pattern:
        """Build a fresh pattern with a new id, timestamps and content hash."""
        now = int(time.time())
        return cls(
            id=PatternId(),
            name=name,
            domain=domain,
            language=language,
            signature=signature,
            template=template,
            variables=list(variables),
            confidence=confidence,
            created_at=now,
            updated_at=now,
            last_used=now,
            content_hash=_content_hash(template),
        )

    def success_rate(self) -> float:
        if self.usage_count == 0:
            return 0.0
        return self.success_count / self.usage_count

    def record_use(self, success: bool) -> None:
        self.usage_count += 1
        if success:
            self.success_count += 1
        self.last_used = int(time.time())

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "name": self.name,
            "domain": self.domain,
            "language": self.language.name,
            "signature": self.signature.to_dict(),
            "template": self.template,
            "variables": [asdict(v) for v in self.variables],
            "confidence": self.confidence,
            "usage_count": self.usage_count,
            "success_count": self.success_count,
            "version": self.version,
            "tags": list(self.tags),
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "last_used": self.last_used,
            "content_hash": self.content_hash,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Pattern:
        try:
            return cls(
                id=PatternId.from_string(data["id"]),
                name=data["name"],
                domain=data["domain"],
                language=Language(data["language"]),
                signature=FunctionSignature.from_dict(data["signature"]),
                template=data["template"],
                variables=[PatternVariable(**v) for v in data["variables"]],
                confidence=float(data["confidence"]),
                usage_count=int(data["usage_count"]),
                success_count=int(data["success_count"]),
                version=int(data["version"]),
                tags=list(data["tags"]),
                created_at=int(data["created_at"]),
                updated_at=int(data["updated_at"]),
                last_used=int(data["last_used"]),
                content_hash=data["content_hash"],
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise SerializationError(f"invalid pattern: {exc}") from exc