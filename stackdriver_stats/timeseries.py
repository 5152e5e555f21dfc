"""Time series translation"""
from typing import Any, List, Optional, Sequence

from .descriptors import create_metric_kind, create_value_type, get_metric_type
from .labels import create_labels
from .models import LabelValue, Metric, MetricDescriptor, Point, Timestamp
from .timestamps import to_iso_string
from .values import create_value
from . import wire


def create_time_series_list(
    metric: Metric, resource: Any, metric_prefix: str, task_value: str
) -> List[wire.TimeSeries]:
    """Convert every series of ``metric`` to a backend time series, in order"""
    descriptor = metric.descriptor
    metric_kind = create_metric_kind(descriptor.type)
    value_type = create_value_type(descriptor.type)

    time_series_list = []
    for series in metric.timeseries:
        time_series_list.append(wire.TimeSeries(
            metric=create_metric(descriptor, series.label_values, metric_prefix, task_value),
            resource=resource,
            metric_kind=metric_kind,
            value_type=value_type,
            points=[create_point(point, series.start_timestamp, value_type) for point in series.points],
        ))
    return time_series_list


def create_metric(
    descriptor: MetricDescriptor,
    label_values: Sequence[Optional[LabelValue]],
    metric_prefix: str,
    task_value: str,
) -> wire.MetricRef:
    return wire.MetricRef(
        type=get_metric_type(descriptor.name, metric_prefix),
        labels=create_labels(descriptor.name, descriptor.label_keys, label_values, task_value),
    )


def create_point(
    point: Point, start_timestamp: Optional[Timestamp], value_type: wire.ValueType
) -> wire.Point:
    """Convert a point; the interval carries a start time only if one is given"""
    value = create_value(value_type, point)
    end_time = to_iso_string(point.timestamp)
    if start_timestamp is not None:
        start_time = to_iso_string(start_timestamp)
        return wire.Point(interval=wire.TimeInterval(end_time=end_time, start_time=start_time), value=value)
    return wire.Point(interval=wire.TimeInterval(end_time=end_time), value=value)
