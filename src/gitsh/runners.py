"""Default runners that hand each line of input to git."""

import shlex
import subprocess
from dataclasses import dataclass
from typing import Iterable, List, Optional
from .environment import Environment


STDIN_SOURCE = '-'


@dataclass(frozen=True)
class NoInput:
    """Returned by a script runner whose source cannot be read."""
    message: str


class _GitRunner:
    """Shared line handling for the script and interactive runners."""
    
    def __init__(self, env: Environment, git_command: Optional[str] = None):
        self.env = env
        self.git_command = git_command or env.git_command()
    
    def _split(self, line: str) -> Optional[List[str]]:
        try:
            return shlex.split(line, comments=True)
        except ValueError as e:
            self.env.print_error(f"gitsh: {e}")
            return None
    
    def _run_line(self, line: str) -> Optional[int]:
        """Run one input line as a git command and return its exit status."""
        words = self._split(line)
        if not words:
            return None
        
        try:
            completed = subprocess.run([self.git_command] + words)
        except OSError as e:
            self.env.print_error(f"gitsh: {self.git_command}: {e.strerror}")
            return None
        
        return completed.returncode


class ScriptRunner(_GitRunner):
    """Runs every line of a script file, or of standard input, through git.
    
    The whole source is read before any line runs, so a source that cannot
    be read or decoded runs nothing.
    """
    
    def run(self, source: str) -> Optional[NoInput]:
        try:
            content = self._read(source)
        except OSError as e:
            return NoInput(f"{source}: {e.strerror or e}")
        except UnicodeDecodeError as e:
            return NoInput(f"{source}: invalid UTF-8 at byte {e.start} ({e.reason})")
        
        self._run_lines(content.splitlines())
        return None
    
    def _read(self, source: str) -> str:
        if source == STDIN_SOURCE:
            return self.env.stdin.read()
        with open(source, 'r', encoding='utf-8') as script:
            return script.read()
    
    def _run_lines(self, lines: Iterable[str]):
        for line in lines:
            self._run_line(line)


class InteractiveRunner(_GitRunner):
    """Reads commands through the environment until the user leaves the shell.
    
    Ctrl-C at the prompt or while git is running returns to the prompt.
    """
    
    PROMPT = 'gitsh> '
    EXIT_COMMANDS = ('exit', 'quit')
    
    def run(self):
        while True:
            try:
                line = self.env.read_line(self.PROMPT)
            except EOFError:
                self.env.print_output('')
                return
            except KeyboardInterrupt:
                self.env.print_output('')
                continue
            
            if line.strip() in self.EXIT_COMMANDS:
                return
            
            try:
                self._run_line(line)
            except KeyboardInterrupt:
                self.env.print_output('')
