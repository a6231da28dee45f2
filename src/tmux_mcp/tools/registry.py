"""Tool definition and dispatch registry."""

import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping
from dataclasses import dataclass

from pydantic import BaseModel, ValidationError

from tmux_mcp.errors import RegistryError, ToolInputError, UnknownToolError

logger = logging.getLogger(__name__)

Handler = Callable[[BaseModel], Awaitable[str]]


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    input_model: type[BaseModel]
    output: str = "text"

    @property
    def input_schema(self) -> dict:
        schema = self.input_model.model_json_schema()
        schema.pop("title", None)
        schema.setdefault("properties", {})
        return schema


@dataclass
class ToolEntry:
    definition: ToolDefinition
    handler: Handler


class ToolRegistry:
    def __init__(self) -> None:
        self._tools: dict[str, ToolEntry] = {}

    @classmethod
    def build(
        cls,
        definitions: Iterable[ToolDefinition],
        handlers: Mapping[str, Handler],
    ) -> "ToolRegistry":
        """Pair every definition with its handler.

        Raises:
            RegistryError: If a definition has no handler, a handler has no
                definition, or a name is declared twice.
        """
        definitions = list(definitions)
        names = [d.name for d in definitions]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise RegistryError(f"Duplicate tool definitions: {', '.join(duplicates)}")

        missing = sorted(set(names) - set(handlers))
        orphaned = sorted(set(handlers) - set(names))
        if missing or orphaned:
            problems = []
            if missing:
                problems.append(f"no handler for {', '.join(missing)}")
            if orphaned:
                problems.append(f"no definition for {', '.join(orphaned)}")
            raise RegistryError("Tool registry mismatch: " + "; ".join(problems))

        registry = cls()
        for definition in definitions:
            registry.register(definition, handlers[definition.name])
        return registry

    def register(self, definition: ToolDefinition, handler: Handler) -> None:
        self._tools[definition.name] = ToolEntry(definition=definition, handler=handler)

    @property
    def names(self) -> set[str]:
        return set(self._tools)

    def get_definitions(self) -> list[ToolDefinition]:
        return [entry.definition for entry in self._tools.values()]

    def validate(self, name: str, arguments: dict | None) -> BaseModel:
        """Parse arguments into the tool's input model.

        Raises:
            UnknownToolError: If no tool has this name.
            ToolInputError: If the arguments do not fit the input shape.
        """
        entry = self._tools.get(name)
        if entry is None:
            raise UnknownToolError(name)

        try:
            return entry.definition.input_model.model_validate(arguments or {})
        except ValidationError as e:
            fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
            detail = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
                for err in e.errors()
            )
            raise ToolInputError(name, fields, detail) from e

    async def dispatch(self, name: str, arguments: dict | None) -> str:
        """Validate arguments and execute the tool, returning its text result."""
        params = self.validate(name, arguments)
        logger.debug("Dispatching %s", name)
        return await self._tools[name].handler(params)
