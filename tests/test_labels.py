"""Tests for label translation"""
from unittest.mock import patch
import pytest

from stackdriver_stats.errors import LabelArityMismatch
from stackdriver_stats.identity import OPENCENSUS_TASK, OPENCENSUS_TASK_DESCRIPTION
from stackdriver_stats.labels import create_label_descriptors, create_labels
from stackdriver_stats.models import LabelKey, LabelValue
from stackdriver_stats.wire import LabelDescriptor

TASK_VALUE = "py-1234@test-host"


class TestCreateLabelDescriptors:
    """Test label descriptor construction"""
    
    def test_keys_converted_and_task_appended(self):
        """Test 1:1 conversion with a trailing task label"""
        descriptors = create_label_descriptors([
            LabelKey("method", "HTTP method"),
            LabelKey("status", "HTTP status"),
        ])
        
        assert descriptors == [
            LabelDescriptor(key="method", description="HTTP method", value_type="STRING"),
            LabelDescriptor(key="status", description="HTTP status", value_type="STRING"),
            LabelDescriptor(key=OPENCENSUS_TASK, description=OPENCENSUS_TASK_DESCRIPTION, value_type="STRING"),
        ]
    
    def test_no_keys(self):
        """Test that the task label is present without any keys"""
        descriptors = create_label_descriptors([])
        
        assert [d.key for d in descriptors] == [OPENCENSUS_TASK]
        assert descriptors[0].to_dict() == {
            "key": "opencensus_task",
            "valueType": "STRING",
            "description": "Opencensus task identifier",
        }
    
    @patch('stackdriver_stats.labels.logger')
    def test_colliding_key_is_logged(self, mock_logger):
        """Test that a caller key equal to the task key is kept and logged"""
        descriptors = create_label_descriptors([LabelKey(OPENCENSUS_TASK, "mine")])
        
        assert [d.key for d in descriptors] == [OPENCENSUS_TASK, OPENCENSUS_TASK]
        mock_logger.warning.assert_called_once()


class TestCreateLabels:
    """Test series label maps"""
    
    def setup_method(self):
        self.keys = [LabelKey("method"), LabelKey("status")]
    
    def test_aligned_values(self):
        """Test positional mapping plus the task label"""
        labels = create_labels("requests", self.keys, [LabelValue("GET"), LabelValue("200")], TASK_VALUE)
        
        assert labels == {"method": "GET", "status": "200", OPENCENSUS_TASK: TASK_VALUE}
    
    def test_unset_value_omitted(self):
        """Test that an unset label value leaves its key out"""
        labels = create_labels("requests", self.keys, [LabelValue(None), LabelValue("500")], TASK_VALUE)
        
        assert labels == {"status": "500", OPENCENSUS_TASK: TASK_VALUE}
    
    @patch('stackdriver_stats.labels.logger')
    def test_empty_string_value_dropped(self, mock_logger):
        """Test that an empty label value leaves its key out and is logged"""
        labels = create_labels("requests", self.keys, [LabelValue(""), LabelValue("500")], TASK_VALUE)
        
        assert labels == {"status": "500", OPENCENSUS_TASK: TASK_VALUE}
        mock_logger.debug.assert_called_once()
        assert mock_logger.debug.call_args.kwargs["label_key"] == "method"
    
    def test_no_labels(self):
        """Test a label-less metric"""
        assert create_labels("uptime", [], [], TASK_VALUE) == {OPENCENSUS_TASK: TASK_VALUE}
    
    @pytest.mark.parametrize("values", [
        [LabelValue("GET")],
        [LabelValue("GET"), LabelValue("200"), LabelValue("extra")],
        [],
    ])
    def test_length_mismatch(self, values):
        """Test that misaligned label values are rejected"""
        with pytest.raises(LabelArityMismatch) as exc_info:
            create_labels("requests", self.keys, values, TASK_VALUE)
        
        assert exc_info.value.metric_name == "requests"
        assert exc_info.value.expected == 2
        assert exc_info.value.actual == len(values)
    
    def test_missing_value_entry(self):
        """Test that a missing label value entry is rejected"""
        with pytest.raises(LabelArityMismatch) as exc_info:
            create_labels("requests", self.keys, [LabelValue("GET"), None], TASK_VALUE)
        
        assert exc_info.value.reason == "missing"
        assert "index 1" in str(exc_info.value)
    
    @patch('stackdriver_stats.labels.logger')
    def test_task_label_wins_collision(self, mock_logger):
        """Test that the task label replaces a caller value under the same key"""
        keys = [LabelKey(OPENCENSUS_TASK)]
        labels = create_labels("requests", keys, [LabelValue("caller")], TASK_VALUE)
        
        assert labels == {OPENCENSUS_TASK: TASK_VALUE}
        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args.kwargs["caller_value"] == "caller"
