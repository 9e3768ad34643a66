"""Request schemas for the todo endpoints."""
from pydantic import BaseModel, ConfigDict, Field, field_validator


class AddTodoRequest(BaseModel):
    """Schema for adding a todo."""
    todo: str = Field(..., description="The todo to add to the list.")


class DeleteTodoRequest(BaseModel):
    """Schema for deleting a todo by position."""
    model_config = ConfigDict(populate_by_name=True)

    todo_idx: int = Field(..., alias="todoIdx", description="The index of the todo to delete.")

    @field_validator("todo_idx", mode="before")
    @classmethod
    def reject_bool_and_float(cls, value):
        """JSON booleans and floats are not indices; numeric strings are."""
        # bool is an int subclass
        if isinstance(value, (bool, float)):
            raise ValueError("todoIdx must be an integer")
        return value
