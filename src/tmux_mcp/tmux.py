"""tmux process runner — spawns the tmux binary and captures its output."""

import asyncio
import logging
import shutil

from tmux_mcp.errors import TmuxCommandError, TmuxNotInstalledError

logger = logging.getLogger(__name__)

NO_SERVER_MARKER = "no server running"


def is_no_server_error(exc: Exception) -> bool:
    """Return True if a tmux failure means no tmux server is running.

    tmux reports this only as stderr text, so this matches on wording.
    """
    return NO_SERVER_MARKER in str(exc)


def _strip_trailing_newline(text: str) -> str:
    if text.endswith("\n"):
        return text[:-1]
    return text


class TmuxClient:
    def __init__(self, binary: str = "tmux", socket_name: str | None = None) -> None:
        self._binary = binary
        self._socket_name = socket_name or None

    @property
    def binary(self) -> str:
        return self._binary

    def is_available(self) -> bool:
        """Check the binary is on PATH. Not cached; PATH may change between calls."""
        return shutil.which(self._binary) is not None

    def ensure_available(self) -> None:
        if not self.is_available():
            logger.warning("tmux binary %r not found on PATH", self._binary)
            raise TmuxNotInstalledError()

    def build_command(self, *args: str) -> list[str]:
        cmd = [self._binary]
        if self._socket_name:
            cmd += ["-L", self._socket_name]
        cmd += list(args)
        return cmd

    async def run(self, *args: str) -> str:
        """Run one tmux command to completion and return its stdout.

        Raises:
            TmuxCommandError: If tmux exits non-zero or cannot be spawned.
        """
        cmd = self.build_command(*args)
        logger.debug("Running: %s", " ".join(cmd))

        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise TmuxCommandError(str(e)) from e

        stdout, stderr = await proc.communicate()

        if proc.returncode != 0:
            message = stderr.decode("utf-8", errors="replace").strip()
            if not message:
                message = f"tmux exited with code {proc.returncode}"
            logger.warning(
                "tmux %s failed (code %s): %s",
                args[0] if args else "",
                proc.returncode,
                message,
            )
            raise TmuxCommandError(message, returncode=proc.returncode)

        return _strip_trailing_newline(stdout.decode("utf-8", errors="replace"))
