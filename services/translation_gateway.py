# services/translation_gateway.py
"""DeepL v2 client: one best-effort request per call, no retry."""
from __future__ import annotations

import logging
from typing import List, Optional

import requests

from models.translation import (
    Language,
    ProviderFailure,
    ProviderResult,
    ProviderSuccess,
    TranslateResult,
)
from utils.exceptions import ProviderConfigError, ProviderError, TransportError

logger = logging.getLogger(__name__)


class TranslationGateway:

    def __init__(self, endpoint: str, api_key: str, timeout: float = 10,
                 session: Optional[requests.Session] = None):
        self.endpoint = (endpoint or "").rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, cfg) -> "TranslationGateway":
        return cls(cfg["DEEPL_ENDPOINT"], cfg["DEEPL_API_KEY"], timeout=cfg["PROVIDER_TIMEOUT"])

    def _headers(self) -> dict:
        return {"Authorization": f"DeepL-Auth-Key {self.api_key}"}

    def _call(self, method: str, path: str, **kwargs) -> ProviderResult:
        if not self.api_key:
            raise ProviderConfigError()
        url = f"{self.endpoint}{path}"
        try:
            resp = self.session.request(
                method, url, headers=self._headers(), timeout=self.timeout, **kwargs
            )
        except requests.RequestException as e:
            logger.warning("provider transport failure %s %s: %s", method, path, e)
            raise TransportError(data=str(e)) from e

        if not resp.ok:
            return ProviderFailure(status=resp.status_code, body=resp.text)
        try:
            return ProviderSuccess(payload=resp.json())
        except ValueError as e:
            logger.warning("provider returned non-JSON body for %s %s", method, path)
            raise TransportError("Translation provider returned an invalid response", data=resp.text) from e

    @staticmethod
    def _unwrap(result: ProviderResult, message: str):
        if isinstance(result, ProviderFailure):
            logger.warning("provider failure status=%s body=%s", result.status, result.body[:200])
            raise ProviderError(result.status, result.body, message=message)
        return result.payload

    def translate(self, text: str, target_lang: str) -> TranslateResult:
        # source_lang 省略，由 DeepL 自动识别
        form = {"text": text, "target_lang": str(target_lang).upper()}
        payload = self._unwrap(self._call("POST", "/v2/translate", data=form), "Translation failed")
        if not isinstance(payload, dict):
            raise TransportError("Translation provider returned an invalid response", data=payload)
        translations = payload.get("translations") or []
        return TranslateResult(translations=list(translations), raw=payload)

    def list_target_languages(self) -> List[Language]:
        payload = self._unwrap(
            self._call("GET", "/v2/languages", params={"type": "target"}),
            "Failed to fetch languages",
        )
        if not isinstance(payload, list):
            raise TransportError("Translation provider returned an invalid response", data=payload)
        return [
            Language(code=item.get("language", ""), display_name=item.get("name", ""))
            for item in payload
        ]


def init_gateway(app) -> TranslationGateway:
    gateway = TranslationGateway.from_config(app.config)
    app.extensions["translation_gateway"] = gateway
    if not gateway.api_key:
        app.logger.warning("DEEPL_API_KEY is not configured; translation APIs are disabled.")
    return gateway
