"""Local transport: run commands on this machine."""

import subprocess
from typing import Optional

from ..plugins import CommandResult, Connection, Option, plugin


class LocalConnection(Connection):
    """Connection to the local machine via subprocesses."""

    def run_command(self, cmd: str) -> CommandResult:
        timeout: Optional[int] = self.config.get("command_timeout")
        result = subprocess.run(  # noqa: S602
            cmd,
            shell=True,
            executable=self.config.get("shell"),
            capture_output=True,
            text=True,
            check=False,
            timeout=timeout,
        )
        return CommandResult(
            stdout=result.stdout,
            stderr=result.stderr,
            exit_status=result.returncode,
        )


class LocalTransport(plugin(1), name="local"):
    """Transport for the machine conduit runs on."""

    options = {
        "shell": Option(default=None),
        "command_timeout": Option(default=None),
    }

    def connection(self) -> LocalConnection:
        return LocalConnection(self.config)
