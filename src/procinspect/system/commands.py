"""
Command execution with full stdout capture.

This module runs a shell command line to completion and returns everything
it wrote to standard output, however large. Standard error is inherited
from the calling process and not captured.
"""

import logging
import subprocess
from pathlib import Path
from typing import Optional, Union

from ..models.result import ErrorKind, Result
from .base import failure_from_os_error

logger = logging.getLogger(__name__)

DEFAULT_READ_CHUNK_SIZE = 4096


class CommandRunner:
    """
    Runs shell commands synchronously.

    Args:
        shell: Shell executable interpreting the command line; None uses
            subprocess's default (/bin/sh on POSIX)
        read_chunk_size: Size of each read while draining stdout
    """

    def __init__(self, shell: Optional[str] = None, read_chunk_size: int = DEFAULT_READ_CHUNK_SIZE):
        if read_chunk_size < 1:
            raise ValueError(f"read_chunk_size must be >= 1, got {read_chunk_size}")
        self.shell = shell
        self.read_chunk_size = read_chunk_size

    def run_command(
        self, shell_line: str, cwd: Optional[Union[str, Path]] = None
    ) -> Result[bytes]:
        """
        Execute ``shell_line`` through the shell and capture its stdout.

        The child's stdout is drained until end-of-stream before waiting for
        it to exit. Waiting first would deadlock as soon as the output fills
        the pipe buffer: the child blocks writing while we block waiting.

        Args:
            shell_line: Command line for the shell
            cwd: Working directory for the command; defaults to ours

        Returns:
            Result holding all bytes written to stdout if the command exited
            with status 0. Otherwise fails with COMMAND_FAILED; the exit
            status and partial output are attached to the error.
        """
        if not shell_line or not shell_line.strip():
            return Result.failure(ErrorKind.INVALID_ARGUMENT, "Command line is empty")

        logger.debug(f"Executing command: '{shell_line}' in '{cwd or '.'}'")
        try:
            process = subprocess.Popen(
                shell_line,
                shell=True,
                executable=self.shell,
                cwd=cwd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
            )
        except OSError as e:
            logger.debug(f"Spawning '{shell_line}' failed: {e}")
            return failure_from_os_error(e, f"Failed to execute the command \"{shell_line}\"")

        # Leaving the with-block closes the pipe and reaps the child.
        with process:
            output = bytearray()
            try:
                while True:
                    chunk = process.stdout.read(self.read_chunk_size)
                    if not chunk:
                        break
                    output += chunk
            except OSError as e:
                process.kill()
                return Result.failure(
                    ErrorKind.IO_ERROR,
                    f"Failed to read the output of the command \"{shell_line}\": {e.strerror or e}",
                    output=bytes(output),
                )
            exit_status = process.wait()

        if exit_status != 0:
            logger.debug(f"Command '{shell_line}' exited with status {exit_status}")
            return Result.failure(
                ErrorKind.COMMAND_FAILED,
                f"Command \"{shell_line}\" exited with status {exit_status}",
                exit_status=exit_status,
                output=bytes(output),
            )
        return Result.success(bytes(output))
