"""Source metric data models (vendor-neutral snapshot)"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Union


class MetricDescriptorType(Enum):
    """Kinds of metric a descriptor can describe"""
    UNSPECIFIED = "unspecified"
    GAUGE_INT64 = "gauge_int64"
    GAUGE_DOUBLE = "gauge_double"
    GAUGE_DISTRIBUTION = "gauge_distribution"
    CUMULATIVE_INT64 = "cumulative_int64"
    CUMULATIVE_DOUBLE = "cumulative_double"
    CUMULATIVE_DISTRIBUTION = "cumulative_distribution"
    SUMMARY = "summary"


@dataclass(frozen=True)
class LabelKey:
    key: str
    description: str = ""


@dataclass(frozen=True)
class LabelValue:
    """Value for the label key at the same position; None means unset"""
    value: Optional[str] = None


@dataclass(frozen=True)
class MetricDescriptor:
    """Static metadata describing a metric"""
    name: str
    description: str
    unit: str
    type: MetricDescriptorType
    label_keys: Sequence[LabelKey] = field(default_factory=tuple)


@dataclass(frozen=True)
class Timestamp:
    """Instant as whole seconds since the epoch plus nanoseconds"""
    seconds: int
    nanos: int = 0


@dataclass(frozen=True)
class BucketOptions:
    """Explicit bucket boundaries; the first bucket is [0, bounds[0])"""
    bounds: Sequence[float] = field(default_factory=tuple)


@dataclass(frozen=True)
class Bucket:
    count: int


@dataclass(frozen=True)
class DistributionValue:
    """Histogram summary of a population of observations"""
    count: int
    sum: float
    sum_of_squared_deviation: float
    bucket_options: BucketOptions
    buckets: Sequence[Bucket] = field(default_factory=tuple)


PointValue = Union[int, float, DistributionValue]


@dataclass(frozen=True)
class Point:
    value: PointValue
    timestamp: Timestamp


@dataclass(frozen=True)
class TimeSeries:
    """Points for one label-value combination of a metric"""
    label_values: Sequence[Optional[LabelValue]]
    points: Sequence[Point]
    start_timestamp: Optional[Timestamp] = None


@dataclass(frozen=True)
class Metric:
    descriptor: MetricDescriptor
    timeseries: List[TimeSeries] = field(default_factory=list)
