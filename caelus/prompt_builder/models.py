"""Shared data models for the Prompt Builder module.

- Purpose: define content categories, style presets, prompt requests, and composed prompts.
- Assumptions: style presets are static and keep their attribute declaration order.
- Side effects: none; classes are passive containers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

STYLE_FIELDS: Tuple[str, ...] = ("lighting", "composition", "focus", "technique", "additional")
COMFORT_LEVELS: Tuple[str, ...] = ("comfort-focused", "balanced", "style-focused")


class ContentCategory(str, Enum):
    """Category declared by the caller; selects which styles are offered."""

    GARMENT = "garment"
    FABRIC = "fabric"
    SKETCH = "sketch"


class ContentType(str, Enum):
    """Content type derived from the description text; selects the closing template."""

    FABRIC = "fabric"
    GARMENT = "garment"
    GENERIC = "generic"


class SketchStyle(str, Enum):
    TECHNICAL = "technical"
    ARTISTIC = "artistic"
    MINIMAL = "minimal"
    DETAILED = "detailed"


def parse_category(value: object) -> ContentCategory:
    if isinstance(value, ContentCategory):
        return value
    if isinstance(value, str):
        try:
            return ContentCategory(value.strip().lower())
        except ValueError:
            pass
    allowed = ", ".join(category.value for category in ContentCategory)
    raise ValueError(f"category must be one of {allowed}; received {value!r}")


@dataclass(frozen=True)
class StylePreset:
    """Named bundle of descriptive fragments used to steer prompt wording."""

    key: str
    label: str
    description: str
    attributes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        validate_style_attributes(self.key, self.attributes)
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def present_attributes(self) -> List[Tuple[str, str]]:
        return [(name, value) for name, value in self.attributes.items() if value]

    def to_dict(self) -> Dict[str, object]:
        return {
            "key": self.key,
            "label": self.label,
            "description": self.description,
            "attributes": dict(self.attributes),
        }


def validate_style_attributes(key: str, attributes: Mapping[str, str]) -> None:
    """Validate a preset's attribute record."""

    for name, value in attributes.items():
        if name not in STYLE_FIELDS:
            raise ValueError(f"style {key!r} has unknown attribute {name!r}")
        if value is not None and not isinstance(value, str):
            raise ValueError(f"style {key!r} attribute {name!r} must be a string or None")
    if not any(attributes.values()):
        raise ValueError(f"style {key!r} must define at least one attribute")


@dataclass(frozen=True)
class PromptRequest:
    category: ContentCategory
    style_key: str
    description: str


@dataclass(frozen=True)
class ComposedPrompt:
    """Final prompt text plus the resolution details that produced it."""

    text: str
    category: ContentCategory
    requested_style_key: str
    style_key: str
    content_type: ContentType

    @property
    def used_default_style(self) -> bool:
        return self.requested_style_key != self.style_key

    def __str__(self) -> str:
        return self.text

    def to_payload(self) -> Dict[str, object]:
        return {
            "prompt": self.text,
            "category": self.category.value,
            "requested_style": self.requested_style_key,
            "style": self.style_key,
            "content_type": self.content_type.value,
            "used_default_style": self.used_default_style,
        }


@dataclass
class StylePreferences:
    """Answers collected by the style analysis questionnaire."""

    style_type: str = ""
    color_preferences: List[str] = field(default_factory=list)
    occasion_wear: List[str] = field(default_factory=list)
    sustainability_priority: int = 7
    comfort_level: str = "balanced"
    existing_wardrobe: str = ""


def validate_preferences(preferences: StylePreferences) -> None:
    priority = preferences.sustainability_priority
    if isinstance(priority, bool) or not isinstance(priority, int) or not 1 <= priority <= 10:
        raise ValueError("sustainability_priority must be an integer between 1 and 10")
    if preferences.comfort_level not in COMFORT_LEVELS:
        raise ValueError(f"comfort_level must be one of {', '.join(COMFORT_LEVELS)}")
    for name in ("color_preferences", "occasion_wear"):
        values = getattr(preferences, name)
        if not isinstance(values, list) or not all(isinstance(value, str) for value in values):
            raise ValueError(f"{name} must be a list of strings")


@dataclass
class GenerationResult:
    """Prompt handed to the generation collaborator and the artifact it returned."""

    prompt: ComposedPrompt
    artifact: str

    def to_payload(self) -> Dict[str, object]:
        return {**self.prompt.to_payload(), "artifact": self.artifact}
