"""Run external commands, raising descriptive errors when they fail."""

from __future__ import annotations

import logging
import os
import shlex
import signal
import subprocess
from collections.abc import Iterable
from typing import Union

from .strings import trim_string

log = logging.getLogger(__name__)

Arg = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


def _describe_returncode(returncode: int) -> str:
    if returncode < 0:
        signum = -returncode
        try:
            name = signal.Signals(signum).name
        except ValueError:
            return f"signal: {signum}"
        return f"signal: {signum} ({name})"
    return f"exit status: {returncode}"


class CommandError(Exception):
    """Base class for failures of an external command.

    ``cmdline`` holds the quoted command line when it is known.
    """

    def __init__(self, cmdline: str | None = None) -> None:
        super().__init__(cmdline)
        self.cmdline = cmdline


class CommandStartupError(CommandError):
    """The command could not be started."""

    def __init__(self, error: OSError, cmdline: str | None = None) -> None:
        super().__init__(cmdline)
        self.error = error

    def __str__(self) -> str:
        if self.cmdline is not None:
            return f"failed to run `{self.cmdline}`"
        return f"failed to execute command: {self.error}"


class CommandExitError(CommandError):
    """The command ran but exited unsuccessfully."""

    def __init__(self, returncode: int, cmdline: str | None = None) -> None:
        super().__init__(cmdline)
        self.returncode = returncode

    def __str__(self) -> str:
        status = _describe_returncode(self.returncode)
        if self.cmdline is not None:
            return f"command `{self.cmdline}` failed: {status}"
        return f"command exited unsuccessfully: {status}"


class CommandDecodeError(CommandError):
    """The command's output was not valid UTF-8."""

    def __init__(self, error: UnicodeDecodeError, cmdline: str | None = None) -> None:
        super().__init__(cmdline)
        self.error = error

    def __str__(self) -> str:
        if self.cmdline is not None:
            return f"could not decode `{self.cmdline}` output"
        return f"could not decode command output: {self.error}"


def _argv(arg0: Arg, args: Iterable[Arg]) -> list[Arg]:
    return [arg0, *args]


def _capture(argv: list[Arg], cwd: Arg | None = None, cmdline: str | None = None) -> bytes:
    try:
        proc = subprocess.run(argv, stdout=subprocess.PIPE, cwd=cwd)
    except OSError as e:
        raise CommandStartupError(e, cmdline) from e
    if proc.returncode != 0:
        raise CommandExitError(proc.returncode, cmdline)
    return proc.stdout


def _decode(data: bytes, cmdline: str | None = None) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise CommandDecodeError(e, cmdline) from e


def runcmd(arg0: Arg, args: Iterable[Arg] = ()) -> None:
    """Run a command, raising if it cannot start or exits unsuccessfully."""
    try:
        proc = subprocess.run(_argv(arg0, args))
    except OSError as e:
        raise CommandStartupError(e) from e
    if proc.returncode != 0:
        raise CommandExitError(proc.returncode)


def readcmd(arg0: Arg, args: Iterable[Arg] = ()) -> str:
    """Run a command and return its stdout, decoded as UTF-8 and trimmed."""
    return trim_string(_decode(_capture(_argv(arg0, args))))


def readcmd_lossy(arg0: Arg, args: Iterable[Arg] = ()) -> str:
    """Like :func:`readcmd`, but replace invalid UTF-8 with U+FFFD."""
    data = _capture(_argv(arg0, args))
    return trim_string(data.decode("utf-8", errors="replace"))


class LoggedCommand:
    """A command that logs its quoted command line at debug level when run."""

    def __init__(self, arg0: Arg) -> None:
        self._argv: list[Arg] = [arg0]
        self._cmdline = shlex.quote(os.fsdecode(arg0))
        self._cwd: Arg | None = None

    @property
    def cmdline(self) -> str:
        """The shell-quoted command line."""
        return self._cmdline

    def arg(self, arg: Arg) -> LoggedCommand:
        """Append one argument."""
        self._argv.append(arg)
        self._cmdline += " " + shlex.quote(os.fsdecode(arg))
        return self

    def args(self, args: Iterable[Arg]) -> LoggedCommand:
        """Append several arguments."""
        for arg in args:
            self.arg(arg)
        return self

    def current_dir(self, path: Arg) -> LoggedCommand:
        """Set the working directory the command runs in."""
        self._cwd = path
        return self

    def status(self) -> None:
        """Run the command, raising if it cannot start or exits unsuccessfully."""
        log.debug("Running: %s", self._cmdline)
        try:
            proc = subprocess.run(self._argv, cwd=self._cwd)
        except OSError as e:
            raise CommandStartupError(e, self._cmdline) from e
        if proc.returncode != 0:
            raise CommandExitError(proc.returncode, self._cmdline)

    def check_output(self) -> str:
        """Run the command and return its stdout decoded as UTF-8."""
        log.debug("Running: %s", self._cmdline)
        data = _capture(self._argv, self._cwd, self._cmdline)
        return _decode(data, self._cmdline)

    def __repr__(self) -> str:
        return f"LoggedCommand({self._cmdline!r})"