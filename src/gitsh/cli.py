#!/usr/bin/env python3
"""gitsh CLI entry point."""

import sys
from .dispatcher import CLI
from .environment import Environment
from .config import Config


def main():
    """Main entry point for gitsh CLI."""
    config = Config()
    
    env = Environment(config)
    
    args = sys.argv[1:]
    
    exit_code = CLI(args=args, env=env).run()
    
    sys.exit(exit_code)


if __name__ == '__main__':
    main()
