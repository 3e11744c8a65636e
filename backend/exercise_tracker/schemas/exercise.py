"""Exercise Schemas — add-exercise result and exercise log responses.

Invariants:
    - date fields are already rendered ("Sun Feb 28 2021"), never ISO
    - ExerciseLogResponse.count == len(log)
"""

from pydantic import AliasChoices, BaseModel, Field, model_validator


class ExerciseResponse(BaseModel):
    """Result of adding an exercise; _id is the owning user's id."""
    id: str = Field(
        validation_alias=AliasChoices("_id", "id"), serialization_alias="_id",
    )
    date: str
    description: str
    duration: int
    username: str


class LogEntry(BaseModel):
    date: str
    description: str
    duration: int


class ExerciseLogResponse(BaseModel):
    id: str = Field(
        validation_alias=AliasChoices("_id", "id"), serialization_alias="_id",
    )
    username: str
    count: int
    log: list[LogEntry]

    @model_validator(mode="after")
    def check_count_matches_log(self):
        if self.count != len(self.log):
            raise ValueError("count must equal the number of log entries")
        return self
