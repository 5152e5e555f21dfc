"""Tests for the process identity"""
import os
from unittest.mock import patch

from stackdriver_stats.identity import (
    OPENCENSUS_TASK,
    default_task_value,
    generate_task_value,
)


class TestGenerateTaskValue:
    """Test task value generation"""
    
    def test_explicit_pid_and_hostname(self):
        """Test the py-<pid>@<hostname> format"""
        assert generate_task_value(pid=123, hostname="worker-1") == "py-123@worker-1"
    
    @patch('socket.gethostname', return_value="box")
    @patch('os.getpid', return_value=42)
    def test_process_values(self, mock_getpid, mock_gethostname):
        """Test that pid and hostname come from the running process"""
        assert generate_task_value() == "py-42@box"
    
    @patch('socket.gethostname', return_value="")
    def test_empty_hostname_falls_back(self, mock_gethostname):
        """Test that an empty hostname resolves to localhost"""
        assert generate_task_value(pid=1) == "py-1@localhost"
    
    @patch('socket.gethostname', side_effect=OSError("no hostname"))
    def test_hostname_error_falls_back(self, mock_gethostname):
        """Test that a hostname lookup failure resolves to localhost"""
        assert generate_task_value(pid=1) == "py-1@localhost"
    
    def test_label_key(self):
        """Test the fixed task label key"""
        assert OPENCENSUS_TASK == "opencensus_task"


class TestDefaultTaskValue:
    """Test the process-wide task value"""
    
    def setup_method(self):
        default_task_value.cache_clear()
    
    def teardown_method(self):
        default_task_value.cache_clear()
    
    def test_computed_once(self):
        """Test that later hostname changes are not observed"""
        with patch('socket.gethostname', return_value="first"):
            first = default_task_value()
        with patch('socket.gethostname', return_value="second"):
            second = default_task_value()
        
        assert first == second == f"py-{os.getpid()}@first"
