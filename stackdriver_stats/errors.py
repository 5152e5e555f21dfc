"""Translation errors"""
from typing import Any, Optional


class TranslationError(Exception):
    """Base class for errors raised while translating metrics"""


class UnsupportedValueType(TranslationError):
    """A point value cannot be encoded for the resolved value type"""

    def __init__(self, value_type: Any, value: Optional[Any] = None):
        self.value_type = value_type
        self.value = value
        name = getattr(value_type, "name", value_type)
        if value is None:
            message = f"unsupported value type: {name}"
        else:
            message = f"unsupported value type: {name} for value of type {type(value).__name__}"
        super().__init__(message)


class LabelArityMismatch(TranslationError):
    """Label values do not line up with the descriptor's label keys"""

    def __init__(self, metric_name: str, expected: int, actual: int, reason: str = "count"):
        self.metric_name = metric_name
        self.expected = expected
        self.actual = actual
        self.reason = reason
        if reason == "missing":
            message = f"metric {metric_name!r}: label value at index {actual} is missing"
        else:
            message = f"metric {metric_name!r}: expected {expected} label values, got {actual}"
        super().__init__(message)


class InvalidTimestamp(TranslationError):
    """A timestamp cannot be rendered as an RFC 3339 UTC instant"""

    def __init__(self, seconds: Any, nanos: Any, reason: str):
        self.seconds = seconds
        self.nanos = nanos
        self.reason = reason
        super().__init__(f"invalid timestamp (seconds={seconds}, nanos={nanos}): {reason}")


class InvalidDistribution(TranslationError):
    """Bucket counts do not line up with the explicit bounds"""

    def __init__(self, bound_count: int, bucket_count: int):
        self.bound_count = bound_count
        self.bucket_count = bucket_count
        super().__init__(
            f"distribution with {bound_count} bounds needs {bound_count + 1} buckets, got {bucket_count}"
        )
