"""
Code Generation Client for BuildAI
===================================

HTTP client that forwards a component list to an Ollama-compatible
text-generation endpoint and returns the generated code.
"""

import json
import os
import logging
from typing import Any, Dict, List, Optional
import httpx
from pydantic import BaseModel

logger = logging.getLogger(__name__)

# Local Ollama server by default
OLLAMA_API_URL = os.getenv("OLLAMA_API_URL", "http://localhost:11434")


class CodeGenConfig(BaseModel):
    """Configuration for the code generation service."""
    model: str = os.getenv("OLLAMA_MODEL", "llama3")
    timeout: float = 120.0


class CodeGenResponse(BaseModel):
    """Result of a code generation call."""
    success: bool
    code: Optional[str] = None
    error: Optional[str] = None


def build_prompt(components: List[Dict[str, Any]]) -> str:
    """Prompt asking for a single-file React component from the component list."""
    return f"""
    You are a web developer. Your task is to generate a simple React component based on a JSON description.
    Here is the JSON:
    {json.dumps(components)}

    Generate a single-file React component that displays a heading with the text from the JSON.
    Do not include extra explanations or comments. Just the code.
  """


class CodeGenClient:
    """Client for the external text-generation service."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        config: Optional[CodeGenConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url or OLLAMA_API_URL
        self.config = config or CodeGenConfig()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.config.timeout,
                headers={"Content-Type": "application/json"},
                transport=self._transport
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def generate_code(self, components: List[Dict[str, Any]]) -> CodeGenResponse:
        """
        Ask the model for code describing the given components.

        Args:
            components: Placed components as plain dicts

        Returns:
            CodeGenResponse with the generated code or an error
        """
        url = f"{self.base_url}/api/generate"
        request_data = {
            "model": self.config.model,
            "prompt": build_prompt(components),
            "stream": False,
        }
        logger.info(f"[CODEGEN-CLIENT] Calling {url} with {len(components)} components")

        try:
            client = await self._get_client()
            response = await client.post(url, json=request_data)
            response.raise_for_status()

            data = response.json()
            code = data.get("response")
            if code is None:
                logger.error("[CODEGEN-CLIENT-ERROR] Response has no 'response' field")
                return CodeGenResponse(success=False, error="Malformed response from model")

            logger.info(f"[CODEGEN-CLIENT-OK] code_chars={len(code)}")
            return CodeGenResponse(success=True, code=code)

        except httpx.TimeoutException:
            logger.error(f"[CODEGEN-CLIENT-TIMEOUT] Request to {url} timed out")
            return CodeGenResponse(success=False, error="Request timed out")

        except httpx.HTTPStatusError as e:
            logger.error(f"[CODEGEN-CLIENT-ERROR] HTTP {e.response.status_code}: {e.response.text}")
            return CodeGenResponse(
                success=False,
                error=f"HTTP {e.response.status_code}: {e.response.text[:200]}"
            )

        except Exception as e:
            logger.error(f"[CODEGEN-CLIENT-ERROR] {type(e).__name__}: {e}")
            return CodeGenResponse(success=False, error=str(e))
