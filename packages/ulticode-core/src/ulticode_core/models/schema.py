from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

KeyType = Literal["number", "string"]


class PrimaryKey(BaseModel):
    """Primary key declaration. `field` may hold a comma-joined composite key."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)
    field: str
    type: KeyType
    auto_increment: bool = Field(default=False, alias="autoIncrement")

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(part.strip() for part in self.field.split(","))

    @property
    def is_composite(self) -> bool:
        return "," in self.field


class Reference(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)
    entity: str
    field: str


class ForeignKey(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)
    field: str
    references: Reference


class SchemaMetadata(BaseModel):
    """Validation rules declared for one entity."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)
    primary_key: PrimaryKey = Field(alias="primaryKey")
    foreign_keys: tuple[ForeignKey, ...] = Field(default=(), alias="foreignKeys")
    enums: dict[str, tuple[str, ...]] = Field(default_factory=dict)
    required_fields: tuple[str, ...] = Field(default=(), alias="requiredFields")
    json_fields: tuple[str, ...] = Field(default=(), alias="jsonFields")
    unique_constraints: tuple[str, ...] = Field(default=(), alias="uniqueConstraints")

    @field_validator("enums", mode="before")
    @classmethod
    def _coerce_enums(cls, v):
        return {} if v is None else v

    def rule_classes(self) -> list[str]:
        """Names of the constraint classes that apply to this entity."""
        classes = ["composite key" if self.primary_key.is_composite else "primary key"]
        if self.foreign_keys:
            classes.append("foreign keys")
        if self.enums:
            classes.append("enums")
        if self.required_fields:
            classes.append("required")
        if self.json_fields:
            classes.append("json")
        if self.unique_constraints:
            classes.append("one-to-one")
        return classes
