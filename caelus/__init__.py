"""
Caelus - personalization core package.

This package contains:
- profile_sort: the weighted designer/consumer questionnaire classifier.
- prompt_builder: style-aware prompt synthesis for the generation service.
- config_service / path_utils: shared settings and platform paths.
"""
