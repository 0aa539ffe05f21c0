"""
Source code helpers for the transaction insight pipeline.

This module flattens explorer source payloads and pulls a best-effort snippet
of a called function out of the contract source text. The snippet extraction
is a keyword split heuristic, not a Solidity parser: comments, string literals
and nested braces are not accounted for.
"""

import json
import logging
import re

logger = logging.getLogger(__name__)

FUNCTION_KEYWORD = "function"


def extract_source_snippet(source_text: str, function_name: str) -> str:
    """
    Extract function source code from contract code.

    Every segment following the `function` keyword that contains the function
    name followed by an opening brace is kept, so overloads (and declarations
    whose name merely contains `function_name`) are all included.

    Args:
        source_text: Full contract source code
        function_name: Name of the called function

    Returns:
        Concatenated matching segments, or "" when nothing matches
    """
    if not function_name:
        return ""

    pattern = re.compile(f"({re.escape(function_name)}.*{{)")

    function_source_code = "".join(
        segment
        for segment in source_text.split(FUNCTION_KEYWORD)
        if pattern.search(segment)
    )

    if function_source_code == "":
        logger.info(f"Function '{function_name}' not found in contract code.")

    return function_source_code


def flatten_source_code(source_code: str) -> str:
    """
    Combine an explorer source payload into a single text.

    Etherscan returns multi-file contracts as standard-JSON wrapped in double
    braces (`{{ ... }}`) or as a plain `{filename: {content: ...}}` mapping.

    Args:
        source_code: Raw `SourceCode` field from the explorer

    Returns:
        Combined source code with `// File:` headers, or the input unchanged
        for single-file contracts
    """
    stripped = source_code.strip()
    if not stripped.startswith('{'):
        return source_code

    json_str = stripped[1:-1] if stripped.startswith('{{') else stripped
    try:
        sources_dict = json.loads(json_str)
    except json.JSONDecodeError as e:
        logger.warning(f"Failed to parse multi-file JSON: {e}")
        return source_code

    if not isinstance(sources_dict, dict):
        return source_code

    files = sources_dict.get('sources', sources_dict)
    combined_code = []
    for filename, filedata in files.items():
        if isinstance(filedata, dict) and 'content' in filedata:
            combined_code.append(f"// File: {filename}\n{filedata.get('content', '')}")

    if not combined_code:
        return source_code

    logger.info(f"Flattened {len(combined_code)} source files")
    return '\n\n'.join(combined_code)
