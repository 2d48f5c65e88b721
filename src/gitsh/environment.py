"""Process context shared by the dispatcher and the runners."""

import sys
from typing import Optional, TextIO
from .config import Config


class Environment:
    """Bundles terminal detection, the configured git command, and output sinks.
    
    An Environment is built once in ``main`` and passed explicitly to the
    dispatcher and runners. It holds no mutable state of its own.
    """
    
    def __init__(self, config: Config, stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None):
        self.config = config
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
    
    def is_tty(self) -> bool:
        """Return True when standard input is attached to a terminal."""
        try:
            return self.stdin.isatty()
        except (AttributeError, ValueError):
            return False
    
    def git_command(self) -> str:
        """Return the configured path or name of the git executable."""
        return self.config.get('git_command', 'git')
    
    def print_output(self, text: str):
        print(text, file=self.stdout, flush=True)
    
    def print_error(self, text: str):
        print(text, file=self.stderr, flush=True)
    
    def debug(self, text: str):
        """Write a diagnostic line to stderr when debugging is enabled."""
        if self.config.get('debug', False):
            self.print_error(f"gitsh: debug: {text}")
    
    def read_line(self, prompt: str) -> str:
        """Prompt for and return one line of input without its newline.
        
        The process terminal goes through ``input`` so line editing works.
        Raises EOFError at end of input.
        """
        if self.stdin is sys.stdin and self.stdout is sys.stdout:
            return input(prompt)
        
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip('\n')
