"""
Cloudflare Workers AI text-generation provider.

Calls the Workers AI REST endpoint directly with urllib, so it needs no SDK.
"""

import json
import logging
import os
import urllib.error
import urllib.request
from typing import Any

from apps.intelligence.providers.ai_base import BaseAIProvider

logger = logging.getLogger(__name__)

API_BASE_URL = "https://api.cloudflare.com/client/v4"


class WorkersAITextProvider(BaseAIProvider):
    """Text generation via Cloudflare Workers AI ``/ai/run/<model>``."""

    name = "workers_ai"
    description = "Cloudflare Workers AI text-generation provider"
    default_model = "@cf/meta/llama-3.1-8b-instruct"
    default_max_tokens = 360

    def __init__(
        self,
        account_id: str = "",
        base_url: str = API_BASE_URL,
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("api_key", os.environ.get("CLOUDFLARE_API_TOKEN", ""))
        super().__init__(**kwargs)
        self.account_id = account_id or os.environ.get("CLOUDFLARE_ACCOUNT_ID", "")
        self.base_url = base_url.rstrip("/")

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/accounts/{self.account_id}/ai/run/{self.model}"

    def _call_api(self, prompt: str, max_tokens: int) -> str:
        if not self.account_id or not self.api_key:
            raise ValueError("Workers AI requires account_id and api_key")

        payload = json.dumps({"prompt": prompt, "max_tokens": max_tokens}).encode("utf-8")
        request = urllib.request.Request(
            self.endpoint,
            data=payload,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self.api_key}",
            },
            method="POST",
        )

        try:
            with urllib.request.urlopen(request, timeout=self.timeout_s) as response:
                body = json.loads(response.read().decode("utf-8"))
        except urllib.error.HTTPError as e:
            error_body = e.read().decode("utf-8") if e.fp else str(e)
            logger.error("Workers AI HTTP error %s: %s", e.code, error_body)
            raise RuntimeError(f"Workers AI HTTP error ({e.code}): {error_body}") from e

        if not body.get("success", True):
            raise RuntimeError(f"Workers AI error: {body.get('errors')}")
        result = body.get("result") or {}
        return result.get("response") or ""
