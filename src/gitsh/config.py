"""Configuration management for gitsh."""

import os
import sys
import json
import yaml
from pathlib import Path
from typing import Any, Optional


class Config:
    """Manages gitsh configuration from config files and environment variables.
    
    Environment variables take precedence over config file settings.
    Environment variable format: GITSH_<KEY>
    Example: GITSH_GIT_COMMAND, GITSH_DEBUG
    """
    
    DEFAULT_CONFIG = {
        'git_command': 'git',
        'debug': False
    }
    
    ENV_VAR_MAP = {
        'GITSH_GIT_COMMAND': 'git_command',
        'GITSH_DEBUG': 'debug'
    }
    
    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration.
        
        Configuration precedence (highest to lowest):
        1. Environment variables (GITSH_*)
        2. Config file (~/.gitsh.conf or specified path)
        3. Default values
        
        Args:
            config_path: Optional path to config file
        """
        self.config = dict(self.DEFAULT_CONFIG)
        
        self.config_path = config_path or str(Path.home() / '.gitsh.conf')
        
        if os.path.exists(self.config_path):
            self._load_config()
        
        self._load_env_vars()
        self._validate_config()
    
    def _load_config(self):
        """Load configuration from YAML or JSON file."""
        try:
            with open(self.config_path, 'r') as f:
                content = f.read()
                try:
                    loaded_config = json.loads(content) if content.strip() else {}
                except json.JSONDecodeError:
                    loaded_config = yaml.safe_load(content) or {}
            
            if not isinstance(loaded_config, dict):
                raise ValueError("expected a mapping at the top level")
            
            self.config.update(loaded_config)
            
        except (OSError, ValueError, yaml.YAMLError) as e:
            print(f"Warning: Failed to load config from {self.config_path}: {e}",
                  file=sys.stderr)
    
    def _load_env_vars(self):
        """Load configuration from environment variables.
        
        Environment variables override config file settings.
        """
        for env_var, key in self.ENV_VAR_MAP.items():
            value = os.environ.get(env_var)
            if value is not None:
                self.config[key] = value
    
    def _validate_config(self):
        """Validate and sanitize configuration values."""
        git_command = self.config.get('git_command')
        if not isinstance(git_command, str) or not git_command.strip():
            self.config['git_command'] = self.DEFAULT_CONFIG['git_command']
        
        debug = self.config.get('debug')
        if isinstance(debug, str):
            self.config['debug'] = debug.lower() in ('1', 'true', 'yes', 'on')
        else:
            self.config['debug'] = bool(debug)
    
    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        return self.config.get(key, default)
    
