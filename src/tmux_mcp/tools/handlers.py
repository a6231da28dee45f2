"""tmux tool handlers.

Each handler checks tmux is installed, issues exactly one tmux command and
maps the outcome to text. Optional fields that are absent (or empty) never
produce a flag.
"""

import logging

from tmux_mcp.errors import TmuxCommandError, TmuxOperationError
from tmux_mcp.tmux import TmuxClient, is_no_server_error
from tmux_mcp.tools.definitions import (
    KillPaneInput,
    ListPanesInput,
    ListSessionsInput,
    ListWindowsInput,
    SelectPaneInput,
    SendCommandInput,
    SplitPaneInput,
)
from tmux_mcp.tools.registry import Handler

logger = logging.getLogger(__name__)

SESSION_FORMAT = "#{session_name}: #{session_windows} windows (created #{session_created_string})"
WINDOW_FORMAT = "#{window_index}: #{window_name} (#{window_panes} panes)"
PANE_FORMAT = "#{pane_id} (#{pane_index}): #{pane_current_command} [#{pane_width}x#{pane_height}]"
PANE_LOCATION_SUFFIX = " in #{session_name}:#{window_index}"

DIRECTION_FLAGS = {"horizontal": "-h", "vertical": "-v"}

NO_SERVER_RUNNING = "No tmux server running"
NO_SESSIONS = "No tmux sessions found"
NO_WINDOWS = "No windows found"
NO_PANES = "No panes found"


def _target_args(target: str | None) -> list[str]:
    return ["-t", target] if target else []


def make_handlers(client: TmuxClient) -> dict[str, Handler]:
    """Bind one handler per tool name to the given tmux client."""

    async def handle_list_sessions(params: ListSessionsInput) -> str:
        client.ensure_available()
        try:
            result = await client.run("list-sessions", "-F", SESSION_FORMAT)
        except TmuxCommandError as e:
            if is_no_server_error(e):
                return NO_SERVER_RUNNING
            raise TmuxOperationError("list sessions", e) from e
        return result or NO_SESSIONS

    async def handle_list_windows(params: ListWindowsInput) -> str:
        client.ensure_available()
        try:
            result = await client.run(
                "list-windows", *_target_args(params.session), "-F", WINDOW_FORMAT
            )
        except TmuxCommandError as e:
            raise TmuxOperationError("list windows", e) from e
        return result or NO_WINDOWS

    async def handle_list_panes(params: ListPanesInput) -> str:
        client.ensure_available()
        # Without a target the listing spans windows, so each row says where it lives.
        fmt = PANE_FORMAT if params.target else PANE_FORMAT + PANE_LOCATION_SUFFIX
        try:
            result = await client.run("list-panes", *_target_args(params.target), "-F", fmt)
        except TmuxCommandError as e:
            raise TmuxOperationError("list panes", e) from e
        return result or NO_PANES

    async def handle_split_pane(params: SplitPaneInput) -> str:
        client.ensure_available()
        args = ["split-window", DIRECTION_FLAGS[params.direction], *_target_args(params.target)]
        if params.command:
            args.append(params.command)
        try:
            await client.run(*args)
        except TmuxCommandError as e:
            raise TmuxOperationError("split pane", e) from e

        message = f"Pane split {params.direction}ly"
        if params.command:
            message += f" with command: {params.command}"
        return message

    async def handle_send_command(params: SendCommandInput) -> str:
        client.ensure_available()
        args = ["send-keys", *_target_args(params.target), params.command]
        if params.enter:
            args.append("Enter")
        try:
            await client.run(*args)
        except TmuxCommandError as e:
            raise TmuxOperationError("send command", e) from e

        pane = f"pane {params.target}" if params.target else "pane"
        return f"Command sent to {pane}: {params.command}"

    async def handle_kill_pane(params: KillPaneInput) -> str:
        client.ensure_available()
        try:
            await client.run("kill-pane", "-t", params.target)
        except TmuxCommandError as e:
            raise TmuxOperationError("kill pane", e) from e
        logger.info("Killed pane %s", params.target)
        return f"Pane {params.target} killed"

    async def handle_select_pane(params: SelectPaneInput) -> str:
        client.ensure_available()
        try:
            await client.run("select-pane", "-t", params.target)
        except TmuxCommandError as e:
            raise TmuxOperationError("select pane", e) from e
        return f"Pane {params.target} selected"

    return {
        "list_sessions": handle_list_sessions,
        "list_windows": handle_list_windows,
        "list_panes": handle_list_panes,
        "split_pane": handle_split_pane,
        "send_command": handle_send_command,
        "kill_pane": handle_kill_pane,
        "select_pane": handle_select_pane,
    }
