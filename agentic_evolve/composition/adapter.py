"""Generating glue code between two patterns whose interfaces differ."""

from __future__ import annotations

from dataclasses import dataclass

from ..model.pattern import Pattern


@dataclass
class AdapterCode:
    """Adapter code connecting the output of one pattern to the input of another."""

    code: str
    source_pattern_id: str
    target_pattern_id: str
    needs_type_conversion: bool
    needs_async_bridge: bool


class AdapterGenerator:
    """Builds adapters for type and async mismatches between patterns."""

    def generate_adapter(self, source: Pattern, target: Pattern) -> AdapterCode:
        """Adapter feeding ``source``'s result into ``target``'s first parameter."""
        target_params = target.signature.params
        target_input = target_params[0].param_type if target_params else None
        needs_type_conversion = source.signature.return_type != target_input
        needs_async_bridge = source.signature.is_async != target.signature.is_async

        return AdapterCode(
            code=self._build_code(
                source, target, needs_type_conversion, needs_async_bridge
            ),
            source_pattern_id=str(source.id),
            target_pattern_id=str(target.id),
            needs_type_conversion=needs_type_conversion,
            needs_async_bridge=needs_async_bridge,
        )

    @staticmethod
    def _build_code(
        source: Pattern,
        target: Pattern,
        needs_type_conversion: bool,
        needs_async_bridge: bool,
    ) -> str:
        source_name = source.signature.name
        parts: list[str] = []

        if needs_async_bridge and source.signature.is_async and not target.signature.is_async:
            parts.append("// Async-to-sync bridge\n")
            parts.append(
                "let result = tokio::runtime::Handle::current()"
                f".block_on({source_name}_result);\n"
            )

        if needs_type_conversion:
            parts.append(
                f"// Type conversion: {source_name} output -> "
                f"{target.signature.name} input\n"
            )
            parts.append(f"let adapted = {source_name}_output.into();\n")

        if not parts:
            return "// Direct connection - no adapter needed\n"
        return "".join(parts)