"""Style-aware prompt synthesis for the image and text generation service."""
from __future__ import annotations

from .compiler import (
    build_style_analysis_prompt,
    classify_content,
    compose,
    render_style_attributes,
    synthesize,
    synthesize_sketch,
)
from .models import ComposedPrompt, ContentCategory, ContentType, PromptRequest, SketchStyle, StylePreset
from .styles import DEFAULT_SKETCH_STYLE, DEFAULT_STYLE_KEY, STYLE_TABLE, resolve_sketch_style, resolve_style

__all__ = [
    "ComposedPrompt",
    "ContentCategory",
    "ContentType",
    "DEFAULT_SKETCH_STYLE",
    "DEFAULT_STYLE_KEY",
    "PromptRequest",
    "STYLE_TABLE",
    "SketchStyle",
    "StylePreset",
    "build_style_analysis_prompt",
    "classify_content",
    "compose",
    "render_style_attributes",
    "resolve_sketch_style",
    "resolve_style",
    "synthesize",
    "synthesize_sketch",
]
