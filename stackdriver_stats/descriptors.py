"""Metric descriptor translation"""
from .labels import create_label_descriptors
from .models import MetricDescriptor, MetricDescriptorType
from .paths import join_path
from . import wire

# GAUGE_DISTRIBUTION is deliberately absent and resolves to UNSPECIFIED.
_METRIC_KINDS = {
    MetricDescriptorType.GAUGE_INT64: wire.MetricKind.GAUGE,
    MetricDescriptorType.GAUGE_DOUBLE: wire.MetricKind.GAUGE,
    MetricDescriptorType.CUMULATIVE_INT64: wire.MetricKind.CUMULATIVE,
    MetricDescriptorType.CUMULATIVE_DOUBLE: wire.MetricKind.CUMULATIVE,
    MetricDescriptorType.CUMULATIVE_DISTRIBUTION: wire.MetricKind.CUMULATIVE,
}

_VALUE_TYPES = {
    MetricDescriptorType.GAUGE_INT64: wire.ValueType.INT64,
    MetricDescriptorType.CUMULATIVE_INT64: wire.ValueType.INT64,
    MetricDescriptorType.GAUGE_DOUBLE: wire.ValueType.DOUBLE,
    MetricDescriptorType.CUMULATIVE_DOUBLE: wire.ValueType.DOUBLE,
    MetricDescriptorType.GAUGE_DISTRIBUTION: wire.ValueType.DISTRIBUTION,
    MetricDescriptorType.CUMULATIVE_DISTRIBUTION: wire.ValueType.DISTRIBUTION,
}


def get_metric_type(name: str, metric_prefix: str) -> str:
    return join_path(metric_prefix, name)


def create_display_name(name: str, display_name_prefix: str) -> str:
    return join_path(display_name_prefix, name)


def create_metric_kind(descriptor_type: MetricDescriptorType) -> wire.MetricKind:
    return _METRIC_KINDS.get(descriptor_type, wire.MetricKind.UNSPECIFIED)


def create_value_type(descriptor_type: MetricDescriptorType) -> wire.ValueType:
    return _VALUE_TYPES.get(descriptor_type, wire.ValueType.UNSPECIFIED)


def create_metric_descriptor(
    descriptor: MetricDescriptor, metric_prefix: str, display_name_prefix: str
) -> wire.MetricDescriptor:
    """Convert a source descriptor to a backend metric descriptor"""
    return wire.MetricDescriptor(
        type=get_metric_type(descriptor.name, metric_prefix),
        description=descriptor.description,
        display_name=create_display_name(descriptor.name, display_name_prefix),
        metric_kind=create_metric_kind(descriptor.type),
        value_type=create_value_type(descriptor.type),
        unit=descriptor.unit,
        labels=create_label_descriptors(descriptor.label_keys),
    )
