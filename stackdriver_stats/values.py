"""Encoding of point values into the backend's typed value"""
from typing import List, Sequence

from . import wire
from .errors import InvalidDistribution, UnsupportedValueType
from .models import Bucket, BucketOptions, DistributionValue, Point


def _is_int64(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_double(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def create_value(value_type: wire.ValueType, point: Point) -> wire.TypedValue:
    """Convert a point's value to the typed value for ``value_type``.

    Values are never coerced: a float on an INT64 metric or a string on any
    metric raises UnsupportedValueType.
    """
    value = point.value
    if value_type == wire.ValueType.INT64:
        if not _is_int64(value):
            raise UnsupportedValueType(value_type, value)
        return wire.Int64Value(value)
    elif value_type == wire.ValueType.DOUBLE:
        if not _is_double(value):
            raise UnsupportedValueType(value_type, value)
        return wire.DoubleValue(float(value))
    elif value_type == wire.ValueType.DISTRIBUTION:
        if not isinstance(value, DistributionValue):
            raise UnsupportedValueType(value_type, value)
        return wire.DistributionPointValue(create_distribution(value))
    raise UnsupportedValueType(value_type)


def create_distribution(distribution: DistributionValue) -> wire.Distribution:
    """Rebase a distribution onto the backend's underflow-first buckets"""
    bounds = distribution.bucket_options.bounds
    if len(distribution.buckets) != len(bounds) + 1:
        raise InvalidDistribution(len(bounds), len(distribution.buckets))

    count = distribution.count
    return wire.Distribution(
        count=count,
        mean=0 if count == 0 else distribution.sum / count,
        sum_of_squared_deviation=distribution.sum_of_squared_deviation,
        bounds=create_explicit_bucket_options(distribution.bucket_options),
        bucket_counts=create_bucket_counts(distribution.buckets),
    )


def create_explicit_bucket_options(bucket_options: BucketOptions) -> List[float]:
    # Source buckets start at [0, bounds[0]) while backend buckets start at
    # (-inf, bounds[0]), so 0 becomes the first explicit bound.
    return [0] + list(bucket_options.bounds)


def create_bucket_counts(buckets: Sequence[Bucket]) -> List[int]:
    # The underflow bucket (-inf, 0) is always empty.
    return [0] + [bucket.count for bucket in buckets]
