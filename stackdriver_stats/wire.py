"""Stackdriver Monitoring wire schema.

Dataclasses mirroring the v3 monitoring REST resources. ``to_dict`` renders the
JSON body field names the API expects.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class MetricKind(Enum):
    UNSPECIFIED = "METRIC_KIND_UNSPECIFIED"
    GAUGE = "GAUGE"
    DELTA = "DELTA"
    CUMULATIVE = "CUMULATIVE"


class ValueType(Enum):
    UNSPECIFIED = "VALUE_TYPE_UNSPECIFIED"
    BOOL = "BOOL"
    INT64 = "INT64"
    DOUBLE = "DOUBLE"
    STRING = "STRING"
    DISTRIBUTION = "DISTRIBUTION"


@dataclass(frozen=True)
class LabelDescriptor:
    key: str
    description: str = ""
    value_type: str = "STRING"

    def to_dict(self) -> Dict[str, Any]:
        return {"key": self.key, "valueType": self.value_type, "description": self.description}


@dataclass(frozen=True)
class MetricDescriptor:
    """Descriptor registered with the backend"""
    type: str
    description: str
    display_name: str
    metric_kind: MetricKind
    value_type: ValueType
    unit: str
    labels: List[LabelDescriptor] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "description": self.description,
            "displayName": self.display_name,
            "metricKind": self.metric_kind.value,
            "valueType": self.value_type.value,
            "unit": self.unit,
            "labels": [label.to_dict() for label in self.labels],
        }


@dataclass(frozen=True)
class MonitoredResource:
    """Resource the series are attributed to; passed through untouched"""
    type: str = "global"
    labels: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "labels": dict(self.labels)}


@dataclass(frozen=True)
class Distribution:
    count: int
    mean: float
    sum_of_squared_deviation: float
    bounds: List[float]
    bucket_counts: List[int]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "mean": self.mean,
            "sumOfSquaredDeviation": self.sum_of_squared_deviation,
            "bucketOptions": {"explicitBuckets": {"bounds": list(self.bounds)}},
            "bucketCounts": list(self.bucket_counts),
        }


@dataclass(frozen=True)
class Int64Value:
    value: int

    def to_dict(self) -> Dict[str, Any]:
        return {"int64Value": self.value}


@dataclass(frozen=True)
class DoubleValue:
    value: float

    def to_dict(self) -> Dict[str, Any]:
        return {"doubleValue": self.value}


@dataclass(frozen=True)
class DistributionPointValue:
    value: Distribution

    def to_dict(self) -> Dict[str, Any]:
        return {"distributionValue": self.value.to_dict()}


TypedValue = Union[Int64Value, DoubleValue, DistributionPointValue]


@dataclass(frozen=True)
class TimeInterval:
    """Point interval; start_time is only set for cumulative series"""
    end_time: str
    start_time: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        interval = {}
        if self.start_time is not None:
            interval["startTime"] = self.start_time
        interval["endTime"] = self.end_time
        return interval


@dataclass(frozen=True)
class Point:
    interval: TimeInterval
    value: TypedValue

    def to_dict(self) -> Dict[str, Any]:
        return {"interval": self.interval.to_dict(), "value": self.value.to_dict()}


@dataclass(frozen=True)
class MetricRef:
    """Series identity: metric type plus label map"""
    type: str
    labels: Dict[str, str]

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "labels": dict(self.labels)}


@dataclass(frozen=True)
class TimeSeries:
    metric: MetricRef
    resource: Any
    metric_kind: MetricKind
    value_type: ValueType
    points: List[Point]

    def to_dict(self) -> Dict[str, Any]:
        resource = self.resource.to_dict() if hasattr(self.resource, "to_dict") else self.resource
        return {
            "metric": self.metric.to_dict(),
            "resource": resource,
            "metricKind": self.metric_kind.value,
            "valueType": self.value_type.value,
            "points": [point.to_dict() for point in self.points],
        }
