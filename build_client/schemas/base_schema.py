from pydantic import BaseModel, ValidationInfo, field_validator


class BaseSchema(BaseModel):

    # JSON null reads as "not sent": the field falls back to its default
    @field_validator("*", mode="before")
    def null_as_default(cls, v, info: ValidationInfo):
        if v is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return v
