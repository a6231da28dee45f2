"""Exception hierarchy for tmux tool calls."""


class TmuxMcpError(Exception):
    """Base class for all errors surfaced to the tool caller."""


class TmuxNotInstalledError(TmuxMcpError):
    """The tmux binary cannot be found on PATH."""

    def __init__(self, message: str = "tmux is not installed or not in PATH") -> None:
        super().__init__(message)


class ToolInputError(TmuxMcpError):
    """Tool arguments do not match the tool's input shape."""

    def __init__(self, tool: str, fields: list[str], detail: str) -> None:
        self.tool = tool
        self.fields = fields
        super().__init__(f"Invalid arguments for {tool}: {detail}")


class UnknownToolError(TmuxMcpError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class RegistryError(TmuxMcpError):
    """Tool definitions and handlers are out of sync."""


class TmuxCommandError(TmuxMcpError):
    """A tmux invocation exited non-zero or could not be spawned."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        self.returncode = returncode
        super().__init__(message)


class TmuxOperationError(TmuxMcpError):
    """A tool operation failed; the message names the operation and its cause."""

    def __init__(self, operation: str, cause: Exception) -> None:
        self.operation = operation
        self.cause = cause
        super().__init__(f"Failed to {operation}: {cause}")
