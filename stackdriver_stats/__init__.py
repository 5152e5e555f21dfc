"""Translation of OpenCensus-style metrics into Stackdriver Monitoring payloads"""
from .errors import (
    InvalidDistribution,
    InvalidTimestamp,
    LabelArityMismatch,
    TranslationError,
    UnsupportedValueType,
)
from .identity import OPENCENSUS_TASK, default_task_value, generate_task_value
from .translator import StackdriverTranslator, translate_descriptor, translate_time_series

__all__ = [
    "InvalidDistribution",
    "InvalidTimestamp",
    "LabelArityMismatch",
    "OPENCENSUS_TASK",
    "StackdriverTranslator",
    "TranslationError",
    "UnsupportedValueType",
    "default_task_value",
    "generate_task_value",
    "translate_descriptor",
    "translate_time_series",
]
