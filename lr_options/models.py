"""Option model: static description of the configurable options of a node."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Mapping, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from lr_common.errors import ConfigurationError

OptionValue = Union[bool, str]
UserValues = Dict[str, OptionValue]


class OptionTier(str, Enum):
    """Who may use an option. Only affects how the option is decorated."""

    CUSTOMER_ONLY = "CUSTOMER_ONLY"
    PREMIUM_ONLY = "PREMIUM_ONLY"
    ADMIN_ONLY = "ADMIN_ONLY"


class OptionType(str, Enum):
    CHECKBOX = "CHECKBOX"
    DROPDOWN = "DROPDOWN"
    TEXT = "TEXT"


class Option(BaseModel):
    """One configurable option of a job.

    ``dependencies`` maps another option id to the values of that option
    which make this one relevant.
    """

    id: str
    name: str = ""
    description: str = ""
    tier: OptionTier = OptionTier.CUSTOMER_ONLY
    type: OptionType
    choices: Tuple[str, ...] = ()
    dependencies: Dict[str, Tuple[Union[bool, str], ...]] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _normalize_nulls(cls, data: Any) -> Any:
        # The API sends null for "no choices" / "no dependencies".
        if isinstance(data, Mapping):
            data = dict(data)
            if data.get("choices") is None:
                data.pop("choices", None)
            if data.get("dependencies") is None:
                data.pop("dependencies", None)
        return data

    @property
    def has_dependencies(self) -> bool:
        return bool(self.dependencies)

    @property
    def default_value(self) -> OptionValue:
        """Value shown as default before the user confirms anything."""
        if self.type is OptionType.CHECKBOX:
            return False
        if self.type is OptionType.DROPDOWN:
            return self.choices[0] if self.choices else ""
        return ""

    @property
    def label(self) -> str:
        return self.name or self.id


OptionSet = Dict[str, Option]


def parse_option_set(raw: Mapping[str, Mapping[str, Any]]) -> OptionSet:
    """Build an OptionSet from the API shape, where the key is the option id.

    Raises ConfigurationError for any option that does not validate, e.g. an
    unknown option type.
    """
    options: OptionSet = {}
    for option_id, payload in raw.items():
        if not isinstance(payload, Mapping):
            raise ConfigurationError(
                f"Option {option_id!r} must be an object",
                context={"option": option_id},
            )
        data = dict(payload)
        data.setdefault("id", option_id)
        try:
            options[option_id] = Option.model_validate(data)
        except ValidationError as exc:
            first = exc.errors()[0]
            location = ".".join(str(part) for part in first.get("loc", ()))
            raise ConfigurationError(
                f"Invalid option {option_id!r}: {location}: {first['msg']}",
                context={"option": option_id, "field": location},
                cause=exc,
            ) from exc
    return options


def _find_cycle(options: OptionSet) -> list[str] | None:
    """Return one dependency cycle as a path of ids, or None."""
    state: dict[str, int] = {}
    stack: list[str] = []

    def visit(option_id: str) -> list[str] | None:
        state[option_id] = 1
        stack.append(option_id)
        for dep_id in options[option_id].dependencies:
            if dep_id not in options:
                continue
            if state.get(dep_id) == 1:
                return stack[stack.index(dep_id):] + [dep_id]
            if dep_id not in state:
                found = visit(dep_id)
                if found:
                    return found
        stack.pop()
        state[option_id] = 2
        return None

    for option_id in options:
        if option_id not in state:
            found = visit(option_id)
            if found:
                return found
    return None


def validate_option_set(options: OptionSet, *, allow_cycles: bool = False) -> None:
    """Reject option sets the resolver and the collector cannot handle."""
    for key, option in options.items():
        if option.id != key:
            raise ConfigurationError(
                f"Option key {key!r} does not match option id {option.id!r}",
                context={"option": key},
            )
        if option.type is OptionType.DROPDOWN and not option.choices:
            raise ConfigurationError(
                f"Dropdown option {key!r} has no choices",
                context={"option": key},
            )
        for dep_id in option.dependencies:
            if dep_id not in options:
                raise ConfigurationError(
                    f"Option {key!r} depends on unknown option {dep_id!r}",
                    context={"option": key, "dependency": dep_id},
                )

    if not allow_cycles:
        cycle = _find_cycle(options)
        if cycle:
            raise ConfigurationError(
                "Cyclic option dependencies: " + " -> ".join(cycle),
                context={"cycle": cycle},
            )
