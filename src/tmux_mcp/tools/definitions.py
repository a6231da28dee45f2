"""Declared tmux tools and their input shapes."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from tmux_mcp.tools.registry import ToolDefinition

Direction = Literal["horizontal", "vertical"]


class ToolInput(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore")


class ListSessionsInput(ToolInput):
    pass


class ListWindowsInput(ToolInput):
    session: str | None = Field(
        default=None, description="Session name (default: current session)"
    )


class ListPanesInput(ToolInput):
    target: str | None = Field(
        default=None, description="Target session:window (default: current)"
    )


class SplitPaneInput(ToolInput):
    target: str | None = Field(
        default=None, description="Target pane (default: current pane)"
    )
    direction: Direction = Field(
        description="Split direction (horizontal: left/right, vertical: top/bottom)"
    )
    command: str | None = Field(default=None, description="Command to run in the new pane")


class SendCommandInput(ToolInput):
    target: str | None = Field(
        default=None, description="Target pane (default: current pane)"
    )
    command: str = Field(description="Command to execute")
    enter: bool = Field(default=True, description="Press Enter after command (default: true)")


class KillPaneInput(ToolInput):
    target: str = Field(min_length=1, description="Target pane ID or index")


class SelectPaneInput(ToolInput):
    target: str = Field(min_length=1, description="Target pane ID or index")


TOOLS: list[ToolDefinition] = [
    ToolDefinition(
        name="list_sessions",
        description="List all tmux sessions",
        input_model=ListSessionsInput,
    ),
    ToolDefinition(
        name="list_windows",
        description="List windows in a tmux session",
        input_model=ListWindowsInput,
    ),
    ToolDefinition(
        name="list_panes",
        description="List panes in a tmux window or session",
        input_model=ListPanesInput,
    ),
    ToolDefinition(
        name="split_pane",
        description="Split a tmux pane horizontally or vertically",
        input_model=SplitPaneInput,
    ),
    ToolDefinition(
        name="send_command",
        description="Send a command to a tmux pane",
        input_model=SendCommandInput,
    ),
    ToolDefinition(
        name="kill_pane",
        description="Kill a tmux pane",
        input_model=KillPaneInput,
    ),
    ToolDefinition(
        name="select_pane",
        description="Select a tmux pane",
        input_model=SelectPaneInput,
    ),
]
