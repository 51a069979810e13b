"""Mock transport: canned command results for tests."""

from typing import Dict, List

from ..plugins import CommandResult, Connection, plugin


class MockConnection(Connection):
    """Connection that answers commands from a table of canned results."""

    def __init__(self, config=None):
        super().__init__(config)
        self.commands: Dict[str, CommandResult] = {}
        self.history: List[str] = []

    def mock_command(
        self, cmd: str, stdout: str = "", stderr: str = "", exit_status: int = 0
    ) -> CommandResult:
        """Register the result returned when ``cmd`` is run."""
        result = CommandResult(stdout=stdout, stderr=stderr, exit_status=exit_status)
        self.commands[cmd] = result
        return result

    def run_command(self, cmd: str) -> CommandResult:
        self.history.append(cmd)
        if cmd in self.commands:
            return self.commands[cmd]
        return CommandResult(stderr=f"{cmd}: command not found", exit_status=1)


class MockTransport(plugin(1), name="mock"):
    """Transport that never leaves the process."""

    def connection(self) -> MockConnection:
        return MockConnection(self.config)
