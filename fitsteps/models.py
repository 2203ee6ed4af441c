from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class FitnessModel(BaseModel):
    """Base for Fitness API payloads, which use camelCase keys on the wire."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

# --- Query Window ---

class TimeWindow(BaseModel):
    """Epoch millisecond range covered by one aggregate query."""
    model_config = ConfigDict(frozen=True)

    start_millis: int
    end_millis: int

    @model_validator(mode="after")
    def _check_order(self) -> TimeWindow:
        if self.end_millis < self.start_millis:
            raise ValueError("end_millis must not be before start_millis")
        return self

    @property
    def duration_millis(self) -> int:
        return self.end_millis - self.start_millis

# --- Aggregate Request ---

class AggregateBy(FitnessModel):
    data_source_id: Optional[str] = Field(None, alias="dataSourceId")
    data_type_name: Optional[str] = Field(None, alias="dataTypeName")

class BucketByTime(FitnessModel):
    # int64 values travel as decimal strings
    duration_millis: str = Field(alias="durationMillis")

class AggregateRequest(FitnessModel):
    """Body for POST users/{userId}/dataset:aggregate."""
    aggregate_by: List[AggregateBy] = Field(alias="aggregateBy")
    bucket_by_time: BucketByTime = Field(alias="bucketByTime")
    start_time_millis: str = Field(alias="startTimeMillis")
    end_time_millis: str = Field(alias="endTimeMillis")

    def to_body(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)

# --- Aggregate Response ---
# Every level is optional: an absent level must stay distinguishable from an empty list.

class Value(FitnessModel):
    int_val: Optional[int] = Field(None, alias="intVal")
    fp_val: Optional[float] = Field(None, alias="fpVal")
    string_val: Optional[str] = Field(None, alias="stringVal")

class DataPoint(FitnessModel):
    data_type_name: Optional[str] = Field(None, alias="dataTypeName")
    origin_data_source_id: Optional[str] = Field(None, alias="originDataSourceId")
    start_time_nanos: Optional[int] = Field(None, alias="startTimeNanos")
    end_time_nanos: Optional[int] = Field(None, alias="endTimeNanos")
    value: Optional[List[Value]] = None

class Dataset(FitnessModel):
    data_source_id: Optional[str] = Field(None, alias="dataSourceId")
    point: Optional[List[DataPoint]] = None

class AggregateBucket(FitnessModel):
    type: Optional[str] = None
    start_time_millis: Optional[int] = Field(None, alias="startTimeMillis")
    end_time_millis: Optional[int] = Field(None, alias="endTimeMillis")
    dataset: Optional[List[Dataset]] = None

class AggregateResponse(FitnessModel):
    """The root object returned by the dataset:aggregate endpoint."""
    bucket: Optional[List[AggregateBucket]] = None
