# dnssec_admin/dnssec/runner.py
import os
import subprocess
import logging
from typing import List, NamedTuple, Optional, Tuple

from dnssec_admin.dnssec.errors import (
    ToolUnavailableError,
    ERR_EXEC_NOT_ALLOWED,
    ERR_EXEC_PDNSSEC,
)

# Configure module logger
logger = logging.getLogger(__name__)

# Exit code reported when the utility was not run
NOT_RUN = -1


class ExecutionResult(NamedTuple):
    output: Tuple[str, ...]
    exit_code: int


class CommandRunner:
    """
    Runs subcommands of the PowerDNS DNSSEC utility (pdnssec / pdnsutil).

    The utility is spawned with an argument vector, never through a shell,
    so zone names and other arguments reach it verbatim.
    """

    def __init__(self, command: Optional[str], exec_enabled: bool = True, timeout: Optional[float] = None):
        self.command = command
        self.exec_enabled = exec_enabled
        self.timeout = timeout

    @classmethod
    def from_config(cls, config) -> "CommandRunner":
        """
        Build a runner from a Flask config mapping

        Args:
            config: Mapping holding the PDNSSEC_* settings

        Returns:
            CommandRunner: Runner for the configured utility
        """
        return cls(
            command=config.get('PDNSSEC_COMMAND') or None,
            exec_enabled=config.get('PDNSSEC_EXEC_ENABLED', True),
            timeout=config.get('PDNSSEC_TIMEOUT'),
        )

    @property
    def configured(self) -> bool:
        return bool(self.command)

    def availability_error(self) -> Optional[ToolUnavailableError]:
        """Return why the utility cannot be called, or None if it can"""
        if not self.exec_enabled:
            return ToolUnavailableError(ERR_EXEC_NOT_ALLOWED)

        if not self.command:
            return ToolUnavailableError(ERR_EXEC_PDNSSEC)

        if not os.path.isfile(self.command) or not os.access(self.command, os.X_OK):
            return ToolUnavailableError(ERR_EXEC_PDNSSEC)

        return None

    def is_available(self) -> bool:
        """
        Check if it's possible to execute the DNSSEC utility

        Returns:
            bool: True if the utility can be called
        """
        error = self.availability_error()
        if error is not None:
            logger.error(f"DNSSEC utility unavailable ({self.command!r}): {error.message}")
            return False
        return True

    def build_argv(self, subcommand: str, *args: str) -> List[str]:
        return [self.command, subcommand, *args]

    def run(self, subcommand: str, *args: str) -> ExecutionResult:
        """
        Execute a subcommand of the DNSSEC utility

        Args:
            subcommand (str): Utility subcommand, e.g. 'secure-zone'
            *args (str): Arguments, each passed as one argv element

        Returns:
            ExecutionResult: Output lines and exit code (-1 if not run)
        """
        if not self.is_available():
            return ExecutionResult((), NOT_RUN)

        argv = self.build_argv(subcommand, *args)
        logger.info(f"Running DNSSEC utility: {argv}")

        try:
            process = subprocess.run(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
                timeout=self.timeout,
                check=False
            )
        except subprocess.TimeoutExpired:
            logger.warning(f"DNSSEC utility timed out after {self.timeout} seconds: {argv}")
            return ExecutionResult((), NOT_RUN)
        except OSError as e:
            logger.warning(f"Error running DNSSEC utility {argv}: {str(e)}")
            return ExecutionResult((), NOT_RUN)

        output = tuple(process.stdout.splitlines()) if process.stdout else ()

        if process.returncode != 0:
            logger.warning(f"DNSSEC utility {subcommand} exited with code {process.returncode}")
        else:
            logger.debug(f"DNSSEC utility {subcommand} completed")

        return ExecutionResult(output, process.returncode)
