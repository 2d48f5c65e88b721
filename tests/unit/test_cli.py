"""Unit tests for the CLI module."""

import unittest
import sys
import os
from unittest.mock import Mock, patch

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../../src'))

from gitsh.cli import main


class TestCLI(unittest.TestCase):
    """Test cases for the CLI entry point."""
    
    @patch('gitsh.cli.sys.exit')
    @patch('gitsh.cli.CLI')
    @patch('gitsh.cli.Environment')
    @patch('gitsh.cli.Config')
    def test_main_basic_command(self, mock_config_class, mock_env_class,
                                mock_cli_class, mock_exit):
        """Test main function wires config, environment and arguments."""
        mock_config = Mock()
        mock_config_class.return_value = mock_config
        mock_env = Mock()
        mock_env_class.return_value = mock_env
        
        mock_cli = Mock()
        mock_cli.run.return_value = 0
        mock_cli_class.return_value = mock_cli
        
        with patch('gitsh.cli.sys.argv', ['gitsh', 'path/to/a/script']):
            main()
        
        mock_config_class.assert_called_once_with()
        mock_env_class.assert_called_once_with(mock_config)
        mock_cli_class.assert_called_once_with(args=['path/to/a/script'], env=mock_env)
        mock_cli.run.assert_called_once_with()
        mock_exit.assert_called_once_with(0)
    
    @patch('gitsh.cli.sys.exit')
    @patch('gitsh.cli.CLI')
    @patch('gitsh.cli.Environment')
    @patch('gitsh.cli.Config')
    def test_main_with_git_flag(self, mock_config_class, mock_env_class,
                                mock_cli_class, mock_exit):
        """Test main function passes flags through untouched."""
        mock_cli_class.return_value.run.return_value = 0
        
        with patch('gitsh.cli.sys.argv', ['gitsh', '--git', '/opt/git']):
            main()
        
        mock_cli_class.assert_called_once_with(
            args=['--git', '/opt/git'], env=mock_env_class.return_value
        )
    
    @patch('gitsh.cli.sys.exit')
    @patch('gitsh.cli.CLI')
    @patch('gitsh.cli.Environment')
    @patch('gitsh.cli.Config')
    def test_main_with_error_exit_code(self, mock_config_class, mock_env_class,
                                       mock_cli_class, mock_exit):
        """Test main function propagates error exit codes."""
        mock_cli_class.return_value.run.return_value = 64
        
        with patch('gitsh.cli.sys.argv', ['gitsh', '--bad-argument']):
            main()
        
        mock_exit.assert_called_once_with(64)
    
    @patch('gitsh.cli.sys.exit')
    @patch('gitsh.cli.CLI')
    @patch('gitsh.cli.Environment')
    @patch('gitsh.cli.Config')
    def test_main_exception_handling(self, mock_config_class, mock_env_class,
                                     mock_cli_class, mock_exit):
        """Test main function lets unexpected runner errors propagate."""
        mock_cli_class.return_value.run.side_effect = Exception("Unexpected error")
        
        with patch('gitsh.cli.sys.argv', ['gitsh']):
            with self.assertRaises(Exception) as context:
                main()
        
        self.assertEqual(str(context.exception), "Unexpected error")
        mock_exit.assert_not_called()
    
    def test_main_exits_with_usage_status(self):
        """Test a real bad-argument invocation exits with EX_USAGE."""
        with patch('gitsh.cli.sys.argv', ['gitsh', '--bad-argument']), \
             patch('sys.stderr') as mock_stderr:
            with self.assertRaises(SystemExit) as context:
                main()
        
        self.assertEqual(context.exception.code, 64)
        written = ''.join(c[0][0] for c in mock_stderr.write.call_args_list)
        self.assertIn('usage: gitsh', written)
    
    def test_main_exits_when_git_is_missing(self):
        """Test a configured git that does not exist exits with EX_UNAVAILABLE."""
        with patch.dict(os.environ, {'GITSH_GIT_COMMAND': '/no/such/git'}), \
             patch('gitsh.cli.sys.argv', ['gitsh']), \
             patch('sys.stderr') as mock_stderr:
            with self.assertRaises(SystemExit) as context:
                main()
        
        self.assertEqual(context.exception.code, 69)
        written = ''.join(c[0][0] for c in mock_stderr.write.call_args_list)
        self.assertIn('gitsh: /no/such/git: No such file or directory', written)


if __name__ == '__main__':
    unittest.main()
