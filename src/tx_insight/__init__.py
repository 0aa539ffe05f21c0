"""Human-readable explanations of pending blockchain transactions."""

from .abi import ABI, function_selector, resolve_function_call
from .prompts import build_summarization_prompt
from .source_code import extract_source_snippet

__all__ = [
    "ABI",
    "build_summarization_prompt",
    "extract_source_snippet",
    "function_selector",
    "resolve_function_call",
]
