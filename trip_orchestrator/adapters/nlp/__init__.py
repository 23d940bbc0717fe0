"""NLP adapters - Implementations of query-parsing ports.

Available implementations:
- GeminiParserAdapter: Google Gemini REST completion
- OpenAIParserAdapter: OpenAI chat-completions REST call
- RuleBasedQueryParser: Deterministic keyword and pattern parser
"""

from .gemini_adapter import GeminiParserAdapter
from .openai_adapter import OpenAIParserAdapter
from .rule_based import RuleBasedQueryParser

__all__ = [
    "GeminiParserAdapter",
    "OpenAIParserAdapter",
    "RuleBasedQueryParser",
]
