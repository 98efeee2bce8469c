# File: seo_scout/oracle.py
"""seo_scout.oracle: advanced SEO suggestions from an OpenAI chat model."""

from __future__ import annotations

import json
import os
from typing import Any, Dict, List, Optional, Sequence

from openai import AsyncOpenAI, OpenAIError

from seo_scout.config import CrawlerConfig

__all__ = ["SuggestionOracle", "OracleError", "API_KEY_ENV"]

API_KEY_ENV = "OPENAI_API_KEY"

_PROMPT = """Given the following SEO analysis for {url}:
Issues: {issues}
Metrics: {metrics}
Provide detailed, actionable suggestions to improve SEO and page performance. \
Focus on specific causes of slow load times (if applicable) and advanced SEO strategies."""


class OracleError(RuntimeError):
    """Suggestion generation failed (credentials, transport, empty reply)."""


class SuggestionOracle:
    """Синхронный (в рамках обхода) вызов LLM с таймаутом и явным каналом ошибок."""

    def __init__(self, config: CrawlerConfig, client: Optional[AsyncOpenAI] = None) -> None:
        self.config = config
        self._client = client

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            api_key = os.environ.get(API_KEY_ENV)
            if not api_key:
                raise OracleError(f"{API_KEY_ENV} is not set")
            self._client = AsyncOpenAI(api_key=api_key, timeout=self.config.oracle_timeout)
        return self._client

    async def suggest(
        self, url: str, issues: Sequence[str], metrics: Dict[str, Any]
    ) -> List[str]:
        """Return non-blank suggestion lines. Raises OracleError."""
        client = self._get_client()
        prompt = _PROMPT.format(
            url=url,
            issues=json.dumps(list(issues), ensure_ascii=False),
            metrics=json.dumps(metrics, ensure_ascii=False, default=str),
        )
        try:
            response = await client.chat.completions.create(
                model=self.config.llm_model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=self.config.llm_max_tokens,
            )
        except OpenAIError as exc:
            raise OracleError(str(exc)) from exc

        try:
            content = response.choices[0].message.content or ""
        except (AttributeError, IndexError) as exc:
            raise OracleError("malformed completion response") from exc
        lines = [line for line in content.split("\n") if line.strip()]
        if not lines:
            raise OracleError("empty completion response")
        return lines
