"""Legacy app definition dataclasses.

Legacy exports are loosely typed: fields may lack a type or help text,
``required`` may be any truthy value, and collections may be stored either
as mappings keyed by name or as lists of objects carrying their own ``key``.
The ``from_dict`` constructors coerce all of that into a predictable shape
without ever rejecting input. Values that end up verbatim in generated
source (labels, placeholders, help text, type tokens) are kept as given.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from app_convert.mapping import STEP_CATEGORIES


def as_mapping(value: Any) -> Mapping:
    """Return value if it is a mapping, otherwise an empty dict."""
    return value if isinstance(value, Mapping) else {}


def keyed_items(collection: Any) -> list[tuple[str, dict]]:
    """Normalize a mapping or a list of keyed objects to (key, dict) pairs."""
    if not collection:
        return []
    if isinstance(collection, Mapping):
        return [(str(key), as_mapping(value)) for key, value in collection.items()]
    if isinstance(collection, (list, tuple)):
        items = []
        for index, value in enumerate(collection):
            value = as_mapping(value)
            items.append((str(value.get("key", index)), value))
        return items
    return []


@dataclass
class LegacyField:
    """One input field of a legacy step."""

    key: str
    type: Any = None
    label: Any = None
    help_text: Any = None
    required: bool = False
    placeholder: Any = None

    @classmethod
    def from_dict(cls, data: Mapping, key: str) -> "LegacyField":
        data = as_mapping(data)
        return cls(
            key=key,
            type=data.get("type"),
            label=data.get("label"),
            help_text=data.get("help_text"),
            required=bool(data.get("required")),
            placeholder=data.get("placeholder"),
        )


@dataclass
class SampleField:
    """One entry of a step's sample result fields."""

    key: str
    type: Any = None
    label: Any = None

    @classmethod
    def from_dict(cls, data: Mapping, key: str) -> "SampleField":
        data = as_mapping(data)
        return cls(key=key, type=data.get("type"), label=data.get("label"))


@dataclass
class LegacyStep:
    """A trigger, search or action definition."""

    key: str
    fields: list[LegacyField] = field(default_factory=list)
    sample_result_fields: list[SampleField] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping, key: str) -> "LegacyStep":
        data = as_mapping(data)
        return cls(
            key=key,
            fields=[
                LegacyField.from_dict(value, field_key)
                for field_key, value in keyed_items(data.get("fields"))
            ],
            sample_result_fields=[
                SampleField.from_dict(value, sample_key)
                for sample_key, value in keyed_items(data.get("sample_result_fields"))
            ],
        )


@dataclass
class LegacyApp:
    """Top-level legacy app definition."""

    title: str = ""
    description: str = ""
    triggers: dict[str, LegacyStep] = field(default_factory=dict)
    searches: dict[str, LegacyStep] = field(default_factory=dict)
    actions: dict[str, LegacyStep] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping) -> "LegacyApp":
        data = as_mapping(data)
        general = as_mapping(data.get("general"))
        steps = {
            legacy_category: {
                key: LegacyStep.from_dict(value, key)
                for key, value in keyed_items(data.get(legacy_category))
            }
            for legacy_category in STEP_CATEGORIES
        }
        return cls(
            title=str(general.get("title") or ""),
            description=str(general.get("description") or ""),
            **steps,
        )

    def steps(self, legacy_category: str) -> dict[str, LegacyStep]:
        """Steps of one legacy category ("triggers", "searches", "actions")."""
        return getattr(self, legacy_category)

    def iter_steps(self) -> Iterator[tuple[str, str, LegacyStep]]:
        """
        Yield (category, key, step) across all categories.

        Categories come in conversion order (triggers, searches, actions) and
        steps in the insertion order of the definition.
        """
        for legacy_category, category in STEP_CATEGORIES.items():
            for key, step in self.steps(legacy_category).items():
                yield category, key, step

    @property
    def step_count(self) -> int:
        return sum(len(self.steps(legacy_category)) for legacy_category in STEP_CATEGORIES)


def coerce_app(legacy_app: "LegacyApp | Mapping") -> LegacyApp:
    """Accept either a parsed LegacyApp or the raw definition mapping."""
    if isinstance(legacy_app, LegacyApp):
        return legacy_app
    return LegacyApp.from_dict(legacy_app)
