"""Argument handling, git validation, and runner selection for gitsh."""

import argparse
import os
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, NamedTuple, Optional, Union

from . import __version__
from .config import Config
from .environment import Environment
from .runners import InteractiveRunner, NoInput, ScriptRunner, STDIN_SOURCE


# sysexits.h
EX_OK = 0
EX_USAGE = 64
EX_NOINPUT = 66
EX_UNAVAILABLE = 69
EX_NOPERM = 77


@dataclass(frozen=True)
class ParsedArguments:
    git_command: Optional[str] = None
    script: Optional[str] = None
    show_version: bool = False
    show_help: bool = False


@dataclass(frozen=True)
class UsageError:
    """Returned by ``parse_arguments`` when the arguments cannot be used."""
    reason: str
    usage: str
    
    def message(self) -> str:
        return f"gitsh: {self.reason}\n{self.usage}"


class _ArgumentParseError(Exception):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports errors to its caller instead of exiting."""
    
    def error(self, message):
        raise _ArgumentParseError(message)


def _build_parser() -> _ArgumentParser:
    parser = _ArgumentParser(
        prog='gitsh',
        description='An interactive shell for git.',
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        '--version',
        action='store_true',
        help='Display the version and exit'
    )
    parser.add_argument(
        '--help',
        action='store_true',
        help='Display this help message and exit'
    )
    parser.add_argument(
        '--git',
        metavar='PATH',
        help='Use the specified git command'
    )
    parser.add_argument(
        'script',
        nargs='?',
        help="Script file to run instead of an interactive session ('-' reads stdin)"
    )
    return parser


def usage() -> str:
    return _build_parser().format_usage().rstrip()


def help_text() -> str:
    return _build_parser().format_help().rstrip()


def parse_arguments(args: List[str]) -> Union[ParsedArguments, UsageError]:
    """Parse process arguments without side effects.
    
    Returns a ParsedArguments on success, or a UsageError for unknown flags,
    a ``--git`` without a value, or more than one script path.
    """
    parser = _build_parser()
    try:
        namespace = parser.parse_args(list(args))
    except _ArgumentParseError as e:
        return UsageError(reason=str(e), usage=parser.format_usage().rstrip())
    
    if namespace.git == '':
        return UsageError(reason='argument --git: expected a non-empty path',
                          usage=parser.format_usage().rstrip())
    
    return ParsedArguments(
        git_command=namespace.git,
        script=namespace.script,
        show_version=namespace.version,
        show_help=namespace.help,
    )


class ExecutableCheck(Enum):
    USABLE = 'usable'
    NOT_FOUND = 'not-found'
    NOT_EXECUTABLE = 'not-executable'


def _candidate_paths(path: str) -> List[str]:
    if os.path.dirname(path):
        return [path]
    
    # An empty PATH entry means the current directory
    search_path = os.environ.get('PATH', os.defpath)
    return [os.path.join(directory or os.curdir, path)
            for directory in search_path.split(os.pathsep)]


def check_executable(path: str) -> ExecutableCheck:
    """Determine whether ``path`` names a usable git without running it.
    
    A bare command name is looked up on PATH. The result is computed fresh on
    every call.
    """
    existing = [candidate for candidate in _candidate_paths(path)
                if os.path.exists(candidate)]
    if not existing:
        return ExecutableCheck.NOT_FOUND
    
    for candidate in existing:
        if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
            return ExecutableCheck.USABLE
    
    return ExecutableCheck.NOT_EXECUTABLE


def executable_error(path: str, check: ExecutableCheck) -> str:
    if check is ExecutableCheck.NOT_FOUND:
        return (f"{path}: No such file or directory\n"
                "Ensure git is on your PATH, or specify the path to git "
                "using the --git option")
    if check is ExecutableCheck.NOT_EXECUTABLE:
        return f"{path}: Permission denied\nEnsure git is executable"
    raise ValueError(f"{check} is not an error")


EXECUTABLE_EXIT_CODES = {
    ExecutableCheck.NOT_FOUND: EX_UNAVAILABLE,
    ExecutableCheck.NOT_EXECUTABLE: EX_NOPERM,
}


class Mode(Enum):
    INTERACTIVE = 'interactive'
    SCRIPT = 'script'


class DispatchDecision(NamedTuple):
    mode: Mode
    source: Optional[str] = None


def decide(parsed: ParsedArguments, stdin_is_tty: Callable[[], bool]) -> DispatchDecision:
    """Pick the runner for this invocation.
    
    The terminal is only queried when no script path was given.
    """
    if parsed.script is not None:
        return DispatchDecision(Mode.SCRIPT, parsed.script)
    if not stdin_is_tty():
        return DispatchDecision(Mode.SCRIPT, STDIN_SOURCE)
    return DispatchDecision(Mode.INTERACTIVE)


class CLI:
    """Entry-point dispatcher: validates git, then runs exactly one runner.
    
    Runners passed in are used as given. Otherwise the default runners are
    only constructed once the invocation has been validated and the mode that
    needs them has been chosen.
    """
    
    def __init__(self, args: List[str], env: Optional[Environment] = None,
                 script_runner=None, interactive_runner=None):
        self.args = list(args)
        self.env = env if env is not None else Environment(Config())
        self.script_runner = script_runner
        self.interactive_runner = interactive_runner
    
    def run(self) -> int:
        """Run gitsh and return the process exit status."""
        parsed = parse_arguments(self.args)
        if isinstance(parsed, UsageError):
            self.env.print_error(parsed.message())
            return EX_USAGE
        
        if parsed.show_help:
            self.env.print_output(help_text())
            return EX_OK
        if parsed.show_version:
            self.env.print_output(f"gitsh {__version__}")
            return EX_OK
        
        git_command = parsed.git_command
        if git_command is None:
            git_command = self.env.git_command()
        self.env.debug(f"using git command {git_command!r}")
        
        check = check_executable(git_command)
        if check is not ExecutableCheck.USABLE:
            self.env.print_error(f"gitsh: {executable_error(git_command, check)}")
            return EXECUTABLE_EXIT_CODES[check]
        
        decision = decide(parsed, lambda: self.env.is_tty())
        self.env.debug(f"{decision.mode.value} mode, source {decision.source!r}")
        
        if decision.mode is Mode.SCRIPT:
            runner = self.script_runner
            if runner is None:
                runner = ScriptRunner(self.env, git_command)
            result = runner.run(decision.source)
            if isinstance(result, NoInput):
                self.env.print_error(f"gitsh: {result.message}")
                return EX_NOINPUT
        else:
            runner = self.interactive_runner
            if runner is None:
                runner = InteractiveRunner(self.env, git_command)
            runner.run()
        
        return EX_OK
