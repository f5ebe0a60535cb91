"""Prompt Builder compiler utilities.

Composes the text handed to the image/text generation service. Every function
here is a pure string transformation; the declared category only selects the
style list offered to the user, while the closing template reacts to the words
actually present in the description.
"""

from __future__ import annotations

from typing import List, Optional, Union

from .models import (
    ComposedPrompt,
    ContentCategory,
    ContentType,
    PromptRequest,
    SketchStyle,
    StylePreferences,
    StylePreset,
    validate_preferences,
)
from .styles import resolve_category, resolve_sketch_style, resolve_style

FABRIC_KEYWORDS = ("fabric", "material")
GARMENT_KEYWORDS = ("garment", "clothing")

SUSTAINABILITY_CONTEXT = (
    "This is for a sustainable fashion platform focusing on eco-friendly materials and ethical production."
)
QUALITY_GUIDE = "Create a high-quality, professional image with excellent lighting and clear details."

BASE_BULLETS = (
    "Photographed/rendered in high resolution",
    "Set against a clean, neutral background",
    "Showing clear texture and material details",
    "Emphasizing sustainable and natural qualities",
)
FABRIC_BULLETS = (
    "Natural fiber characteristics and texture",
    "Weave pattern and structure",
    "Surface details and draping quality",
    "Material thickness and weight appearance",
)
FABRIC_CLOSING_LINE = "Include a sense of scale and close-up texture detail."
GARMENT_BULLETS = (
    "Clean construction and finishing",
    "Natural draping and movement",
    "Sustainable design elements",
    "Ethical craftsmanship details",
)
ADDITIONAL_REQUIREMENTS = (
    "Maintain consistent style throughout the image",
    "Ensure professional quality and clarity",
    "Emphasize sustainable and ethical aspects",
    "Follow the specified technique and focus points",
    "Create a cohesive visual narrative",
)

SKETCH_SUSTAINABLE_ELEMENTS = (
    "Zero-waste pattern cutting considerations",
    "Modular or transformable components",
    "Repair-friendly construction",
    "Biodegradable material suggestions",
    "Minimal seam construction",
)
SKETCH_CONSTRUCTION_DETAILS = (
    "Seam placements",
    "Closure methods",
    "Fabric grain lines",
    "Key measurements",
    "Special sustainable construction notes",
)
SKETCH_GUIDELINES = (
    "Use professional fashion illustration techniques",
    "Show clear design intentions",
    "Highlight sustainable design elements",
    "Include fabric behavior and draping",
)
SKETCH_ADDITIONAL_REQUIREMENTS = (
    "Include front view and at least one detail view",
    "Show fabric texture suggestions",
    "Include sustainable material callouts",
    "Note any zero-waste design elements",
    "Highlight modular or adaptable features",
)
SKETCH_STYLE_NOTES = (
    "Style notes: Professional fashion illustration focusing on sustainable and ethical design elements."
)

ANALYSIS_REQUESTS = (
    "Recommended sustainable fabrics based on preferences",
    "Suggested clothing styles that would be flattering",
    "Sustainable fashion tips personalized to the user",
    "Color palette recommendations",
)
ANALYSIS_CLOSING_LINE = "Keep the response focused on sustainable fashion and practical advice."
DEFAULT_SUSTAINABLE_CHOICES = "Focus on sustainable and eco-friendly recommendations"


def _bullets(lines) -> str:
    return "\n".join(f"- {line}" for line in lines)


def _block(heading: str, lines) -> str:
    return f"{heading}\n{_bullets(lines)}"


def _join_blocks(blocks: List[str]) -> str:
    return "\n\n".join(blocks)


def classify_content(description: Optional[str]) -> ContentType:
    """Derive the content type from keywords in the description (case-insensitive).

    Fabric keywords win over garment keywords when both appear.
    """

    lowered = (description or "").lower()
    if any(keyword in lowered for keyword in FABRIC_KEYWORDS):
        return ContentType.FABRIC
    if any(keyword in lowered for keyword in GARMENT_KEYWORDS):
        return ContentType.GARMENT
    return ContentType.GENERIC


def render_style_attributes(preset: StylePreset) -> str:
    return "\n".join(f"{name[:1].upper()}{name[1:]}: {value}" for name, value in preset.present_attributes())


def base_template() -> str:
    return f"{SUSTAINABILITY_CONTEXT} {QUALITY_GUIDE} The image should be:\n{_bullets(BASE_BULLETS)}"


def closing_template(content_type: ContentType) -> str:
    """Return the base boilerplate plus the bullet list for ``content_type``."""

    base = base_template()
    if content_type is ContentType.FABRIC:
        return f"{base}\n{_block('The fabric should demonstrate:', FABRIC_BULLETS)}\n{FABRIC_CLOSING_LINE}"
    if content_type is ContentType.GARMENT:
        return f"{base}\n{_block('The garment should showcase:', GARMENT_BULLETS)}"
    return base


def _compose_text(preset: StylePreset, content_type: ContentType, description: str) -> str:
    return _join_blocks(
        [
            description,
            f"Style Requirements:\n{render_style_attributes(preset)}",
            closing_template(content_type),
            _block("Additional Requirements:", ADDITIONAL_REQUIREMENTS),
        ]
    )


def synthesize(category: Union[ContentCategory, str], style_key: Optional[str], description: str) -> str:
    """Compose the image prompt for a description, category, and style key.

    Unknown style keys use the default preset and unknown categories are read
    as garment. The closing template comes from ``classify_content(description)``,
    not from ``category``.
    """

    resolve_category(category)
    description = description or ""
    return _compose_text(resolve_style(style_key), classify_content(description), description)


def compose(request: PromptRequest) -> ComposedPrompt:
    category = resolve_category(request.category)
    description = request.description or ""
    preset = resolve_style(request.style_key)
    content_type = classify_content(description)
    return ComposedPrompt(
        text=_compose_text(preset, content_type, description),
        category=category,
        requested_style_key=request.style_key,
        style_key=preset.key,
        content_type=content_type,
    )


def sketch_style_template(style: Union[SketchStyle, str, None]) -> str:
    return f"{resolve_sketch_style(style)}\n{_block('The sketch should:', SKETCH_GUIDELINES)}"


def synthesize_sketch(description: str, style: Union[SketchStyle, str, None] = None) -> str:
    """Compose a design sketch prompt; unknown styles use the detailed template."""

    return _join_blocks(
        [
            f"Fashion design sketch: {description or ''}",
            _block("Emphasize sustainable design elements such as:", SKETCH_SUSTAINABLE_ELEMENTS),
            _block("Include technical details such as:", SKETCH_CONSTRUCTION_DETAILS),
            sketch_style_template(style),
            _block("Additional requirements:", SKETCH_ADDITIONAL_REQUIREMENTS),
            SKETCH_STYLE_NOTES,
        ]
    )


def format_style_preferences(preferences: StylePreferences) -> str:
    validate_preferences(preferences)
    return "\n".join(
        [
            f"Style Type: {preferences.style_type}",
            f"Color Preferences: {', '.join(preferences.color_preferences)}",
            f"Occasions: {', '.join(preferences.occasion_wear)}",
            f"Sustainability Priority: {preferences.sustainability_priority}/10",
            f"Comfort Level: {preferences.comfort_level}",
            f"Current Wardrobe: {preferences.existing_wardrobe}",
        ]
    )


def build_style_analysis_prompt(
    preferences: Union[StylePreferences, str],
    measurements: str = "",
    sustainable_choices: str = DEFAULT_SUSTAINABLE_CHOICES,
) -> str:
    """Compose the personal style analysis request from questionnaire answers."""

    summary = preferences if isinstance(preferences, str) else format_style_preferences(preferences)
    header = "\n".join(
        [
            f"User Preferences: {summary}",
            f"Measurements: {measurements}",
            f"Sustainable Choices: {sustainable_choices}",
        ]
    )
    numbered = "\n".join(f"{idx}. {line}" for idx, line in enumerate(ANALYSIS_REQUESTS, start=1))
    return _join_blocks(
        [
            header,
            f"Please provide a detailed style analysis including:\n{numbered}\n{ANALYSIS_CLOSING_LINE}",
        ]
    )
