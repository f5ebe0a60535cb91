"""Style preset tables for prompt synthesis.

Both tables are looked up through total ``resolve_*`` functions that fall back
to a named default; unknown keys are expected when the UI's style list drifts
from these tables.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

from .models import ContentCategory, SketchStyle, StylePreset, parse_category

logger = logging.getLogger(__name__)

DEFAULT_STYLE_KEY = "realistic-studio"
DEFAULT_SKETCH_STYLE = SketchStyle.DETAILED.value
DEFAULT_CATEGORY = ContentCategory.GARMENT


def _preset(key: str, label: str, description: str, **attributes: str) -> StylePreset:
    return StylePreset(key=key, label=label, description=description, attributes=attributes)


_PRESETS: Iterable[StylePreset] = (
    _preset(
        "realistic-studio",
        "Studio Photography",
        "Professional studio lighting with clean background",
        lighting="Professional studio lighting setup with even illumination",
        composition="Clean, minimal background with focus on subject",
        focus="Sharp detail and clear textures",
        technique="High-end fashion photography style",
    ),
    _preset(
        "realistic-editorial",
        "Editorial Style",
        "Fashion magazine style with artistic composition",
        lighting="Dramatic lighting with artistic shadows",
        composition="Editorial fashion magazine style composition",
        focus="Artistic interpretation while maintaining detail",
        technique="Contemporary fashion photography",
    ),
    _preset(
        "realistic-natural",
        "Natural Light",
        "Soft, natural lighting with organic feel",
        lighting="Soft, natural daylight",
        composition="Organic and environmental context",
        focus="Natural texture and color representation",
        technique="Documentary-style photography",
    ),
    _preset(
        "watercolor",
        "Watercolor Illustration",
        "Soft, flowing artistic style with watercolor effects",
        technique="Watercolor illustration technique",
        focus="Flowing, artistic interpretation",
        additional="Soft color transitions and artistic flourishes",
    ),
    _preset(
        "fashion-sketch",
        "Fashion Sketch",
        "Professional fashion illustration style",
        technique="Professional fashion illustration",
        focus="Style and movement emphasis",
        additional="Gestural lines with detailed rendering",
    ),
    _preset(
        "contemporary-art",
        "Contemporary Art",
        "Modern artistic interpretation with bold elements",
        technique="Modern artistic interpretation",
        focus="Bold, creative expression",
        additional="Innovative composition and style elements",
    ),
    _preset(
        "technical-flat",
        "Technical Flat",
        "Detailed technical drawing with specifications",
        technique="Technical fashion flat drawing",
        focus="Precise technical details",
        additional="Construction specifications and measurements",
    ),
    _preset(
        "construction-detail",
        "Construction Detail",
        "Focus on construction and assembly details",
        technique="Detailed technical illustration",
        focus="Construction methods and assembly",
        additional="Close-up views of technical elements",
    ),
    _preset(
        "pattern-draft",
        "Pattern Making",
        "Pattern-making style with measurements",
        technique="Pattern-making documentation",
        focus="Pattern pieces and measurements",
        additional="Technical notation and specifications",
    ),
    _preset(
        "macro-detail",
        "Macro Texture",
        "Close-up view of fabric texture and details",
        technique="Macro photography",
        focus="Extreme close-up of texture details",
        additional="Fiber and construction visibility",
    ),
    _preset(
        "weave-pattern",
        "Weave Pattern",
        "Detailed view of fabric construction",
        technique="Technical textile photography",
        focus="Weave or knit structure",
        additional="Pattern repeat and construction detail",
    ),
    _preset(
        "drape-study",
        "Drape Study",
        "Focus on fabric behavior and movement",
        technique="Fabric behavior documentation",
        focus="Movement and drape qualities",
        additional="Multiple angles and lighting conditions",
    ),
    _preset(
        "sustainable-story",
        "Sustainability Story",
        "Showcasing sustainable aspects and production",
        technique="Documentary style",
        focus="Sustainable production methods",
        additional="Environmental context and impact visualization",
    ),
    _preset(
        "zero-waste",
        "Zero Waste Design",
        "Emphasizing zero-waste pattern cutting",
        technique="Technical design illustration",
        focus="Zero-waste pattern cutting",
        additional="Pattern efficiency and sustainability notes",
    ),
    _preset(
        "ethical-production",
        "Ethical Production",
        "Highlighting ethical manufacturing details",
        technique="Documentary fashion photography",
        focus="Ethical production methods",
        additional="Craftsmanship and production detail",
    ),
)

STYLE_TABLE: Mapping[str, StylePreset] = MappingProxyType({preset.key: preset for preset in _PRESETS})

BASE_STYLES = ("realistic-studio", "realistic-editorial", "realistic-natural")
ARTISTIC_STYLES = ("watercolor", "fashion-sketch", "contemporary-art")
TECHNICAL_STYLES = ("technical-flat", "construction-detail", "pattern-draft")
TEXTURE_STYLES = ("macro-detail", "weave-pattern", "drape-study")

CATEGORY_STYLES: Mapping[ContentCategory, tuple] = MappingProxyType(
    {
        ContentCategory.FABRIC: BASE_STYLES + TEXTURE_STYLES + ("sustainable-story",),
        ContentCategory.SKETCH: ARTISTIC_STYLES + TECHNICAL_STYLES + ("zero-waste",),
        ContentCategory.GARMENT: BASE_STYLES + ARTISTIC_STYLES + ("ethical-production",),
    }
)

SKETCH_STYLE_TEMPLATES: Mapping[str, str] = MappingProxyType(
    {
        SketchStyle.TECHNICAL.value: (
            "Create a detailed technical fashion sketch with precise construction details, "
            "measurements, and fabric specifications."
        ),
        SketchStyle.ARTISTIC.value: (
            "Create an artistic fashion illustration with flowing lines, dramatic poses, "
            "and emphasis on style and movement."
        ),
        SketchStyle.MINIMAL.value: (
            "Create a clean, minimal fashion sketch focusing on essential design elements and silhouette."
        ),
        SketchStyle.DETAILED.value: (
            "Create a comprehensive fashion sketch showing both design aesthetics and technical details."
        ),
    }
)


def resolve_style(key: Optional[str]) -> StylePreset:
    """Return the preset for ``key`` or the default preset when it is unknown."""

    preset = STYLE_TABLE.get(key) if isinstance(key, str) else None
    if preset is None:
        logger.debug("Unknown style %r; using %s", key, DEFAULT_STYLE_KEY)
        return STYLE_TABLE[DEFAULT_STYLE_KEY]
    return preset


def resolve_category(value: object) -> ContentCategory:
    """Return the declared category, or garment when it is not recognised."""

    try:
        return parse_category(value)
    except ValueError:
        logger.debug("Unknown category %r; using %s", value, DEFAULT_CATEGORY.value)
        return DEFAULT_CATEGORY


def resolve_sketch_style(key: Optional[str]) -> str:
    """Return the sketch template for ``key``, falling back to the detailed template."""

    if isinstance(key, SketchStyle):
        key = key.value
    template = SKETCH_STYLE_TEMPLATES.get(key) if isinstance(key, str) else None
    if template is None:
        logger.debug("Unknown sketch style %r; using %s", key, DEFAULT_SKETCH_STYLE)
        return SKETCH_STYLE_TEMPLATES[DEFAULT_SKETCH_STYLE]
    return template


def style_options(category: Optional[ContentCategory] = None) -> List[StylePreset]:
    """List the presets the UI offers for a category (base styles when none is given)."""

    keys = CATEGORY_STYLES[parse_category(category)] if category is not None else BASE_STYLES
    return [STYLE_TABLE[key] for key in keys]
