"""Intent extraction service with explicit fallback handling.

LLM parsers are tried in their configured order; every failure is logged
and the next parser is tried, ending with the rule-based parser, which
cannot fail. ``extract`` therefore always returns a ParsedInput.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from ..adapters.nlp.rule_based import RuleBasedQueryParser
from ..domain.errors import LanguageModelError
from ..domain.models import ParsedInput
from ..nlp.prompts import build_prompt, parse_model_reply
from ..ports.nlp import IntentExtractorPort, LanguageModelParserPort


@dataclass
class IntentExtractionService:
    """Place-name and intent extraction with logged fallback.

    Attributes:
        parsers: LLM parsers in preference order (may be empty)
        fallback: Deterministic parser used when every LLM parser fails
    """

    parsers: Sequence[LanguageModelParserPort] = field(default_factory=tuple)
    fallback: IntentExtractorPort = field(default_factory=RuleBasedQueryParser)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _try_parser(self, parser: LanguageModelParserPort, query: str) -> ParsedInput | None:
        name = getattr(parser, "name", type(parser).__name__)

        try:
            reply = parser.complete(build_prompt(query))
        except LanguageModelError as e:
            self._logger.warning(
                "LLM parser failed, trying next",
                extra={"parser": name, "status": e.status_code, "error": str(e)},
            )
            return None
        except Exception as e:
            self._logger.warning(
                "LLM parser raised unexpectedly, trying next",
                extra={"parser": name, "error": str(e)},
            )
            return None

        parsed = parse_model_reply(reply, source=name)
        if parsed is None:
            self._logger.warning(
                "LLM parser reply unusable, trying next",
                extra={"parser": name},
            )
        return parsed

    def extract(self, query: str) -> ParsedInput:
        """Extract the place name and intent from a query.

        Args:
            query: Raw user query.

        Returns:
            ParsedInput from the first parser that produced a usable
            answer; the rule-based result otherwise. Never raises.
        """
        for parser in self.parsers:
            parsed = self._try_parser(parser, query)
            if parsed is not None:
                self._logger.info(
                    "Query parsed",
                    extra={
                        "source": parsed.source,
                        "place_name": parsed.place_name,
                        "intent": parsed.intent.value,
                        "confidence": parsed.confidence,
                    },
                )
                return parsed

        if self.parsers:
            self._logger.warning(
                "All LLM parsers failed, using rule-based fallback",
                extra={"parsers": [getattr(p, "name", "?") for p in self.parsers]},
            )

        parsed = self.fallback.extract(query)
        self._logger.info(
            "Query parsed",
            extra={
                "source": parsed.source,
                "place_name": parsed.place_name,
                "intent": parsed.intent.value,
                "confidence": parsed.confidence,
            },
        )
        return parsed
