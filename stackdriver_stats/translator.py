"""Translator for converting metric snapshots into Stackdriver payloads"""
from typing import Any, Dict, Iterable, List, Optional, Tuple

from config import Config
from logging_config import bind_metric, get_logger, log_error, log_translation
from .descriptors import create_metric_descriptor
from .errors import TranslationError
from .identity import default_task_value
from .models import Metric, MetricDescriptor
from .timeseries import create_time_series_list
from . import wire

logger = get_logger(__name__)


def translate_descriptor(
    descriptor: MetricDescriptor, metric_prefix: str, display_name_prefix: str
) -> wire.MetricDescriptor:
    """Convert a metric descriptor for (re)registration with the backend"""
    return create_metric_descriptor(descriptor, metric_prefix, display_name_prefix)


def translate_time_series(
    metric: Metric, resource: Any, metric_prefix: str, task_value: Optional[str] = None
) -> List[wire.TimeSeries]:
    """Convert a metric's series; ``resource`` is passed through unchanged"""
    if task_value is None:
        task_value = default_task_value()
    return create_time_series_list(metric, resource, metric_prefix, task_value)


class StackdriverTranslator:
    """Translates metrics using configured prefixes, task value and resource"""

    def __init__(self, config: Optional[Config] = None, task_value: Optional[str] = None):
        self.config = config or Config()
        self.task_value = task_value or self.config.get_task_value()
        self.default_resource = self.config.get_default_resource()

    def translate_descriptor(self, descriptor: MetricDescriptor) -> wire.MetricDescriptor:
        return translate_descriptor(
            descriptor, self.config.metric_prefix, self.config.display_name_prefix
        )

    def translate_time_series(self, metric: Metric, resource: Any = None) -> List[wire.TimeSeries]:
        if resource is None:
            resource = self.default_resource
        time_series = translate_time_series(
            metric, resource, self.config.metric_prefix, self.task_value
        )
        log_translation(
            logger,
            metric_name=metric.descriptor.name,
            series_count=len(time_series),
            point_count=sum(len(series.points) for series in time_series),
        )
        return time_series

    def translate_metrics(
        self, metrics: Iterable[Metric], resource: Any = None
    ) -> Tuple[List[wire.MetricDescriptor], List[wire.TimeSeries]]:
        """Translate a snapshot into descriptors and time series, in metric order"""
        descriptors = []
        time_series = []
        for metric in metrics:
            try:
                descriptors.append(self.translate_descriptor(metric.descriptor))
                time_series.extend(self.translate_time_series(metric, resource))
            except TranslationError as e:
                metric_logger = bind_metric(logger, metric.descriptor.name, self.config.metric_prefix)
                log_error(metric_logger, e, {"metric_name": metric.descriptor.name})
                raise

        logger.debug(
            "Snapshot translated",
            descriptor_count=len(descriptors),
            time_series_count=len(time_series),
            event_type="snapshot_translation"
        )
        return descriptors, time_series

    @staticmethod
    def create_time_series_body(time_series: Iterable[wire.TimeSeries]) -> Dict[str, Any]:
        """JSON body for a single timeSeries.create call"""
        return {"timeSeries": [series.to_dict() for series in time_series]}
