"""Service wrappers for the Prompt Builder module.

- Purpose: compose prompts for UI callers and hand them to an injected generation collaborator.
- Assumptions: ``generate`` owns network access, retries, and error reporting.
- Side effects: none beyond whatever the injected collaborator does.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Union

from caelus.config_service import DEFAULT_CONFIG, LoadedConfig

from . import compiler
from .models import ComposedPrompt, GenerationResult, PromptRequest, SketchStyle, StylePreferences, parse_category

logger = logging.getLogger(__name__)

Generate = Callable[[str], str]

FASHION_EXPERT_SYSTEM_PROMPT = (
    "You are a fashion expert AI assistant helping users with sustainable fashion choices. "
    "Focus on eco-friendly materials, sustainable practices, and personalized style recommendations. "
    "Keep responses concise but informative."
)
STYLE_CONSULTANT_SYSTEM_PROMPT = (
    "You are a professional fashion consultant specializing in sustainable fashion and personal styling."
)


def _generation_setting(settings: Optional[LoadedConfig], name: str):
    default = DEFAULT_CONFIG["generation"][name]
    if settings is None:
        return default
    return settings.get(f"generation.{name}", default)


def build_image_request(prompt: str, settings: Optional[LoadedConfig] = None) -> Dict[str, object]:
    """Return the JSON body for an image generation call."""

    return {
        "model": _generation_setting(settings, "image_model"),
        "prompt": prompt,
        "n": 1,
        "size": _generation_setting(settings, "image_size"),
        "quality": _generation_setting(settings, "image_quality"),
        "response_format": _generation_setting(settings, "response_format"),
    }


def build_chat_request(
    user_input: str,
    system_prompt: str = FASHION_EXPERT_SYSTEM_PROMPT,
    max_tokens: Optional[int] = None,
    settings: Optional[LoadedConfig] = None,
) -> Dict[str, object]:
    """Return the JSON body for a chat completion call."""

    return {
        "model": _generation_setting(settings, "chat_model"),
        "messages": [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_input},
        ],
        "max_tokens": max_tokens if max_tokens is not None else _generation_setting(settings, "suggestion_max_tokens"),
        "temperature": _generation_setting(settings, "temperature"),
    }


def build_style_analysis_request(
    preferences: Union[StylePreferences, str],
    measurements: str = "",
    sustainable_choices: str = compiler.DEFAULT_SUSTAINABLE_CHOICES,
    settings: Optional[LoadedConfig] = None,
) -> Dict[str, object]:
    prompt = compiler.build_style_analysis_prompt(preferences, measurements, sustainable_choices)
    return build_chat_request(
        prompt,
        system_prompt=STYLE_CONSULTANT_SYSTEM_PROMPT,
        max_tokens=_generation_setting(settings, "analysis_max_tokens"),
        settings=settings,
    )


class PromptSynthesisService:
    """Facade to compose prompts for image and sketch generation."""

    def compose(self, request: PromptRequest) -> ComposedPrompt:
        composed = compiler.compose(request)
        if composed.used_default_style:
            logger.info(
                "Style %r is not in the style table; composed with %s", request.style_key, composed.style_key
            )
        return composed

    def compose_sketch(self, description: str, style: Union[SketchStyle, str, None] = None) -> str:
        return compiler.synthesize_sketch(description, style)


class GenerationHooks:
    """Hooks for UI layers to hand composed prompts to the generation service.

    The ``generate`` collaborator receives the prompt text and returns the
    produced artifact (an image URL or a text completion).
    """

    def __init__(self, generate: Generate, service: Optional[PromptSynthesisService] = None) -> None:
        self.generate = generate
        self.service = service or PromptSynthesisService()

    def preflight_request(self, request: PromptRequest) -> Optional[str]:
        """Validate a request before composition.

        Returns a string message when the request is rejected; otherwise returns ``None``.
        """

        try:
            parse_category(request.category)
        except ValueError as exc:
            return str(exc)
        if not isinstance(request.description, str) or not request.description.strip():
            return "Describe what you want to generate before submitting."
        return None

    def publish(self, composed: ComposedPrompt) -> GenerationResult:
        artifact = self.generate(composed.text)
        return GenerationResult(prompt=composed, artifact=artifact)

    def generate_from_request(self, request: PromptRequest) -> GenerationResult:
        message = self.preflight_request(request)
        if message:
            raise ValueError(message)
        return self.publish(self.service.compose(request))
