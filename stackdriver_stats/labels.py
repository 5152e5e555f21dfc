"""Label translation: label keys to descriptors, label values to label maps"""
from typing import Dict, List, Optional, Sequence

from logging_config import get_logger
from .errors import LabelArityMismatch
from .identity import OPENCENSUS_TASK, OPENCENSUS_TASK_DESCRIPTION
from .models import LabelKey, LabelValue
from .wire import LabelDescriptor

logger = get_logger(__name__)

# Only string-typed labels are supported.
LABEL_VALUE_TYPE = "STRING"


def create_label_descriptors(label_keys: Sequence[LabelKey]) -> List[LabelDescriptor]:
    """Convert label keys 1:1 and append the opencensus_task descriptor"""
    descriptors = []
    for label_key in label_keys:
        if label_key.key == OPENCENSUS_TASK:
            logger.warning(
                "Label key collides with the task label",
                label_key=label_key.key,
                event_type="label_collision"
            )
        descriptors.append(LabelDescriptor(
            key=label_key.key,
            description=label_key.description,
            value_type=LABEL_VALUE_TYPE
        ))

    descriptors.append(LabelDescriptor(
        key=OPENCENSUS_TASK,
        description=OPENCENSUS_TASK_DESCRIPTION,
        value_type=LABEL_VALUE_TYPE
    ))
    return descriptors


def create_labels(
    metric_name: str,
    label_keys: Sequence[LabelKey],
    label_values: Sequence[Optional[LabelValue]],
    task_value: str,
) -> Dict[str, str]:
    """Build the series label map from positionally aligned keys and values.

    Raises LabelArityMismatch when the sequences differ in length or a value
    entry is missing. A LabelValue holding None or an empty string leaves
    its key out of the map.
    The task label is always set last and replaces any caller value under the
    same key.
    """
    if len(label_values) != len(label_keys):
        raise LabelArityMismatch(metric_name, len(label_keys), len(label_values))

    labels = {}
    for index, (label_key, label_value) in enumerate(zip(label_keys, label_values)):
        if label_value is None:
            raise LabelArityMismatch(metric_name, len(label_keys), index, reason="missing")
        if label_value.value:
            labels[label_key.key] = label_value.value
        elif label_value.value == "":
            logger.debug(
                "Empty label value dropped",
                metric_name=metric_name,
                label_key=label_key.key,
                event_type="label_dropped"
            )

    if OPENCENSUS_TASK in labels:
        logger.warning(
            "Task label overrides caller label",
            metric_name=metric_name,
            label_key=OPENCENSUS_TASK,
            caller_value=labels[OPENCENSUS_TASK],
            event_type="label_collision"
        )
    labels[OPENCENSUS_TASK] = task_value
    return labels
