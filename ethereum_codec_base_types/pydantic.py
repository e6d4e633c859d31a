"""Base pydantic classes used to define the codec models."""

from typing import Any, Literal, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

Model = TypeVar("Model", bound=BaseModel)


class CodecBaseModel(BaseModel):
    """Base model for all the codec models."""

    def serialize(
        self,
        mode: Literal["json", "python"],
        by_alias: bool,
        exclude_none: bool = True,
    ) -> dict[str, Any]:
        """
        Serialize the model to the specified format with the given parameters.

        :param mode: The mode of serialization.
              If mode is 'json', the output will only contain JSON serializable types.
              If mode is 'python', the output may contain non-JSON-serializable Python objects.
        :param by_alias: Whether to use aliases for field names.
        :param exclude_none: Whether to exclude fields with None values, default is True.
        :return: The serialized representation of the model.
        """
        return self.model_dump(mode=mode, by_alias=by_alias, exclude_none=exclude_none)

    def __repr_args__(self):
        """
        Generate the attribute-value pairs for the object representation.

        Only attributes with non-None values are included, and scalar values are
        rendered with their string representation so hex types read as hex.
        """
        attrs_names = self.serialize(mode="python", by_alias=False).keys()
        repr_attrs = []
        for a in attrs_names:
            v = getattr(self, a)
            match v:
                case list() | dict() | BaseModel() | None:
                    repr_attrs.append((a, v))
                case _:
                    repr_attrs.append((a, str(v)))
        return repr_attrs


class CopyValidateModel(CodecBaseModel):
    """Model that supports copying with validation."""

    def copy(self: Model, **kwargs) -> Model:
        """Create a copy of the model with the updated fields that are validated."""
        return self.__class__(**(self.model_dump(exclude_unset=True) | kwargs))


class CamelModel(CopyValidateModel):
    """
    A base model that converts field names to camel case when serializing.

    For example, the field name `max_fee_per_gas` in a Python model will be represented
    as `maxFeePerGas` when it is serialized to json.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
        frozen=True,
    )
