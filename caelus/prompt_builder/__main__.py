"""CLI entrypoint for Prompt Builder.

- Purpose: compose an image or sketch prompt from the command line, or list the styles offered per category.
- Assumptions: no generation call is made; the prompt is printed for the caller to forward.
- Side effects: none.
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import Iterable, Optional

from caelus.config_service import ConfigError, load_config, resolve_log_level

from .models import ContentCategory, PromptRequest, SketchStyle, parse_category
from .services import PromptSynthesisService, build_image_request
from .styles import style_options


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compose style-aware prompts for the generation service")
    parser.add_argument(
        "--category",
        default=ContentCategory.GARMENT.value,
        help="Content category: " + ", ".join(category.value for category in ContentCategory),
    )
    parser.add_argument("--style", default="", help="Style preset key")
    parser.add_argument("--description", help="Free-text description of the design")
    parser.add_argument(
        "--sketch-style",
        help="Compose a design sketch prompt instead (" + ", ".join(style.value for style in SketchStyle) + ")",
    )
    parser.add_argument("--json", action="store_true", help="Emit the prompt with its resolution metadata")
    parser.add_argument("--request-body", action="store_true", help="Emit the image request body")
    parser.add_argument("--list-styles", action="store_true", help="List the styles offered for --category")
    parser.add_argument("--log-level", help="Logging level (defaults to logging.level from settings)")
    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        settings = load_config()
        logging.basicConfig(level=resolve_log_level(args.log_level or settings.get("logging.level", "INFO")))
    except ConfigError as exc:
        raise SystemExit(str(exc)) from exc

    try:
        category = parse_category(args.category)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    if args.list_styles:
        print(json.dumps([preset.to_dict() for preset in style_options(category)], indent=2))
        return

    if not args.description or not args.description.strip():
        raise SystemExit("--description is required")

    service = PromptSynthesisService()
    if args.sketch_style is not None:
        text = service.compose_sketch(args.description, args.sketch_style)
        payload = {"prompt": text, "sketch_style": args.sketch_style}
    else:
        composed = service.compose(PromptRequest(category=category, style_key=args.style, description=args.description))
        text = composed.text
        payload = composed.to_payload()

    if args.request_body:
        print(json.dumps(build_image_request(text, settings), indent=2))
    elif args.json:
        print(json.dumps(payload, indent=2))
    else:
        print(text)


if __name__ == "__main__":
    main()
