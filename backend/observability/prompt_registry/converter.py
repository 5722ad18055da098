"""
LangChain to Langfuse prompt converter.

Langfuse text prompts use {{variable}} placeholders where LangChain
PromptTemplate uses {variable}; this module converts in both directions.

Dependencies: langchain_core.prompts
System role: Template format conversion for prompt registry
"""

import re

from langchain_core.prompts import PromptTemplate

# Single braces not already doubled
_LANGCHAIN_VAR = re.compile(r"(?<!\{)\{([^{}]+)\}(?!\})")
_LANGFUSE_VAR = re.compile(r"\{\{\s*([^{}\s]+)\s*\}\}")


def to_langfuse_variables(content: str) -> str:
    """
    Convert LangChain variable syntax to Langfuse format.

    Args:
        content: Template string with {variable} placeholders

    Returns:
        str: Template string with {{variable}} placeholders
    """
    return _LANGCHAIN_VAR.sub(r"{{\1}}", content)


def to_langchain_variables(content: str) -> str:
    """
    Convert Langfuse variable syntax back to LangChain format.

    Args:
        content: Template string with {{variable}} placeholders

    Returns:
        str: Template string with {variable} placeholders
    """
    return _LANGFUSE_VAR.sub(r"{\1}", content)


def convert_text_template(template: PromptTemplate) -> str:
    """
    Convert LangChain PromptTemplate to Langfuse text format.

    Example:
        >>> template = PromptTemplate.from_template("Summarize {reviews}")
        >>> convert_text_template(template)
        'Summarize {{reviews}}'
    """
    return to_langfuse_variables(template.template)
