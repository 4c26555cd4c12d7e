"""Form field domain models.

Record types declare their fields up front as a list of FieldDescriptors;
nothing is discovered by introspecting the values themselves.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from formcheck.fields.enums import DataTypeTag, EmailValidationLevel


class EmailValidationRule(BaseModel):
    """Email verification settings for a single field."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["email"] = "email"
    level: EmailValidationLevel = Field(
        default=EmailValidationLevel.MX,
        description="Depth of checking requested from the service",
    )
    error_message: str = Field(
        default="The {display_name} field is not a valid email address.",
        description="Rejection message; {display_name} is substituted",
    )


class TelephoneValidationRule(BaseModel):
    """Telephone verification settings for a single field."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["phone"] = "phone"
    default_country: str | None = Field(
        default=None,
        description="Country assumed when the number has no international prefix",
    )
    default_country_field: str | None = Field(
        default=None,
        description="Sibling field to take the country from",
    )
    treat_unavailable_mobile_as_invalid: bool = Field(
        default=False,
        description="Reject mobiles that are switched off or unreachable",
    )
    treat_no_coverage_as_invalid: bool = Field(
        default=False,
        description="Reject numbers from countries the service cannot check",
    )
    error_message: str = Field(
        default="The {display_name} field is not a valid telephone number.",
        description="Rejection message; {display_name} is substituted",
    )


ValidationRule = Annotated[
    EmailValidationRule | TelephoneValidationRule,
    Field(discriminator="kind"),
]


class FieldDescriptor(BaseModel):
    """Static metadata for one field of a record type."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Field name")
    data_type: DataTypeTag | str | None = Field(
        default=None,
        description="Semantic data-type tag",
    )
    read_only: bool = Field(default=False, description="Never rewritten")
    display_name: str | None = Field(
        default=None,
        description="Name shown in validation messages",
    )
    validation: ValidationRule | None = Field(
        default=None,
        description="External verification applied to the field",
    )

    @property
    def label(self) -> str:
        return self.display_name or self.name

    @property
    def tag(self) -> str | None:
        """The data-type tag as a plain string."""
        if isinstance(self.data_type, DataTypeTag):
            return self.data_type.value
        return self.data_type


class RecordType(BaseModel):
    """A named, ordered set of field descriptors."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Record type name")
    descriptors: tuple[FieldDescriptor, ...] = Field(..., description="Declared fields in order")

    @model_validator(mode="after")
    def _check_unique_names(self) -> "RecordType":
        seen: set[str] = set()
        for descriptor in self.descriptors:
            if descriptor.name in seen:
                raise ValueError(f"Duplicate field name: {descriptor.name}")
            seen.add(descriptor.name)
        return self

    def descriptor(self, name: str) -> FieldDescriptor | None:
        for descriptor in self.descriptors:
            if descriptor.name == name:
                return descriptor
        return None

    def fields_tagged(self, tag: DataTypeTag | str) -> list[FieldDescriptor]:
        wanted = tag.value if isinstance(tag, DataTypeTag) else tag
        return [d for d in self.descriptors if d.tag == wanted]

    def create(self, **values: Any) -> "Record":
        """Create a record of this type from keyword values."""
        return Record(record_type=self, values=values)


class Record(BaseModel):
    """Caller-owned field values for one submitted form."""

    model_config = ConfigDict(frozen=False)

    record_type: RecordType = Field(..., description="Declared field metadata")
    values: dict[str, Any] = Field(default_factory=dict, description="Field values")

    @model_validator(mode="after")
    def _check_known_fields(self) -> "Record":
        unknown = [k for k in self.values if self.record_type.descriptor(k) is None]
        if unknown:
            raise ValueError(
                f"Unknown fields for {self.record_type.name}: {', '.join(sorted(unknown))}"
            )
        return self

    def get(self, name: str) -> Any:
        return self.values.get(name)

    def set(self, name: str, value: Any) -> None:
        if self.record_type.descriptor(name) is None:
            raise KeyError(name)
        self.values[name] = value


class FieldChange(BaseModel):
    """A value rewritten by normalization."""

    model_config = ConfigDict(frozen=True)

    field_name: str
    old_value: str
    new_value: str


class FieldValidationError(BaseModel):
    """A field rejected by validation."""

    model_config = ConfigDict(frozen=True)

    field_name: str
    message: str


class CountryContext(BaseModel):
    """Inputs for resolving the default country of one call."""

    model_config = ConfigDict(frozen=True)

    explicit_sibling_value: str | None = None
    attribute_default: str | None = None
    process_default: str = ""

    @classmethod
    def from_record(
        cls,
        record: Record,
        *,
        attribute_default: str | None = None,
        process_default: str = "",
        country_field: str | None = None,
    ) -> "CountryContext":
        """Build the context for a field of `record`.

        The sibling value comes from `country_field` when named, otherwise
        from the first field tagged Country.
        """
        sibling: Any = None
        if country_field:
            sibling = record.get(country_field)
        else:
            tagged = record.record_type.fields_tagged(DataTypeTag.COUNTRY)
            if tagged:
                sibling = record.get(tagged[0].name)

        return cls(
            explicit_sibling_value=sibling if isinstance(sibling, str) else None,
            attribute_default=attribute_default,
            process_default=process_default,
        )
