"""Tests for metric path joining"""
from stackdriver_stats.paths import join_path


class TestJoinPath:
    """Test slash-separated path joining"""
    
    def test_prefix_and_name(self):
        """Test joining a type prefix and a hierarchical name"""
        assert join_path("custom.googleapis.com/opencensus", "request/latency") == \
            "custom.googleapis.com/opencensus/request/latency"
    
    def test_redundant_separators(self):
        """Test that repeated and trailing separators collapse"""
        assert join_path("OpenCensus/", "/request//count") == "OpenCensus/request/count"
    
    def test_empty_segments(self):
        """Test that empty segments are dropped"""
        assert join_path("", "latency") == "latency"
        assert join_path("OpenCensus", "") == "OpenCensus"
    
    def test_dot_segments_are_names(self):
        """Test that dot segments are not resolved"""
        assert join_path("a", "./b/../c") == "a/./b/../c"
    
    def test_leading_separator_kept(self):
        """Test that a leading separator on the first segment is kept"""
        assert join_path("/root", "name") == "/root/name"
