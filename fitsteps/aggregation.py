"""
Builds the daily steps aggregate query and sums its response.
"""

from datetime import datetime, time, timedelta, timezone, tzinfo
from typing import Optional

from .errors import MalformedResponse
from .models import AggregateBy, AggregateRequest, AggregateResponse, BucketByTime, TimeWindow

STEP_COUNT_DATA_SOURCE_ID = "derived:com.google.step_count.delta:com.google.android.gms:estimated_steps"
STEP_COUNT_DATA_TYPE_NAME = "com.google.step_count.delta"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_epoch_millis(moment: datetime) -> int:
    """Milliseconds since the UNIX epoch for a timezone-aware datetime."""
    return (moment - _EPOCH) // timedelta(milliseconds=1)


def local_midnight(now: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """Start of the day containing ``now``, in ``tz`` or the host's local timezone."""
    if tz is None:
        today = now.astimezone().date()
        return datetime.combine(today, time.min).astimezone()
    today = now.astimezone(tz).date()
    return datetime.combine(today, time.min, tzinfo=tz)


def compute_time_window(now: Optional[datetime] = None, tz: Optional[tzinfo] = None) -> TimeWindow:
    """Window from local midnight to ``now`` (default: the current UTC instant).

    The duration is plain epoch arithmetic, so on a DST transition day it is the real
    elapsed time rather than the number of wall-clock hours since midnight.
    """
    now = now or datetime.now(timezone.utc)
    return TimeWindow(
        start_millis=to_epoch_millis(local_midnight(now, tz)),
        end_millis=to_epoch_millis(now),
    )


def build_aggregate_request(window: TimeWindow) -> AggregateRequest:
    """Request all estimated steps in ``window`` as a single bucket."""
    return AggregateRequest(
        aggregate_by=[
            AggregateBy(
                data_source_id=STEP_COUNT_DATA_SOURCE_ID,
                data_type_name=STEP_COUNT_DATA_TYPE_NAME,
            )
        ],
        bucket_by_time=BucketByTime(duration_millis=str(window.duration_millis)),
        start_time_millis=str(window.start_millis),
        end_time_millis=str(window.end_millis),
    )


def extract_step_count(response: AggregateResponse) -> int:
    """Sum every integer value in the response.

    Empty lists contribute nothing. An absent level, or a value without ``intVal``,
    raises MalformedResponse.
    """
    if response.bucket is None:
        raise MalformedResponse("bucket", "Aggregate response has no buckets")

    total = 0
    for bucket in response.bucket:
        if bucket.dataset is None:
            raise MalformedResponse("dataset", "Aggregate bucket has no datasets")
        for dataset in bucket.dataset:
            if dataset.point is None:
                raise MalformedResponse("point", f"Dataset {dataset.data_source_id} has no points")
            for point in dataset.point:
                if point.value is None:
                    raise MalformedResponse("value", "Data point has no values")
                for value in point.value:
                    if value.int_val is None:
                        raise MalformedResponse("intVal", "Data point value is not an integer")
                    total += value.int_val
    return total
