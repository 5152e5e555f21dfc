"""Configuration for the Stackdriver stats translator"""
from pathlib import Path
from typing import Dict, Literal, Optional
from pydantic import Field, validator
from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Translator configuration with Pydantic validation and environment-based settings"""

    # Naming
    metric_prefix: str = Field(default="custom.googleapis.com/opencensus", description="Metric type prefix")
    display_name_prefix: str = Field(default="OpenCensus", description="Metric display name prefix")

    # Identity
    task_value: Optional[str] = Field(default=None, description="Override for the opencensus_task label value")

    # Monitored resource used when the caller does not supply one
    resource_type: str = Field(default="global", description="Default monitored resource type")
    resource_labels_str: str = Field(default="", description="Default monitored resource labels (k=v,k2=v2)")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", description="Log level")
    log_file: Optional[Path] = Field(default=None, description="Log file path")

    class Config:
        env_prefix = ""
        case_sensitive = False

    @validator('metric_prefix')
    def validate_metric_prefix(cls, v):
        if not v or not v.strip("/"):
            raise ValueError("METRIC_PREFIX must not be empty")
        return v

    @validator('log_file')
    def ensure_log_directory(cls, v):
        """Ensure the parent directory exists for the log file"""
        if isinstance(v, Path):
            v.parent.mkdir(parents=True, exist_ok=True)
        return v

    @property
    def resource_labels(self) -> Dict[str, str]:
        """Get default resource labels as a dict"""
        labels = {}
        for pair in self.resource_labels_str.split(','):
            if '=' in pair:
                key, value = pair.split('=', 1)
                labels[key.strip()] = value.strip()
        return labels

    def get_task_value(self) -> str:
        """Get the configured task value or the process default"""
        if self.task_value:
            return self.task_value
        from stackdriver_stats.identity import default_task_value
        return default_task_value()

    def get_default_resource(self):
        """Build the monitored resource used when none is supplied"""
        from stackdriver_stats.wire import MonitoredResource
        return MonitoredResource(type=self.resource_type, labels=self.resource_labels)
