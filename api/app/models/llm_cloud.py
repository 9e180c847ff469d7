import logging
import time

import anthropic

from app.config import settings
from app.middleware.metrics import LLM_DURATION
from app.services.prompt import RoastPrompt

logger = logging.getLogger("roastme")

FALLBACK_ROAST = "Even AI refuses to roast you. That's how boring you are."


class RoastGenerationError(Exception):
    """The provider call failed. Carries no provider detail."""


class RoastLLM:
    def __init__(
        self,
        client: anthropic.AsyncAnthropic,
        model: str,
        max_tokens: int = 500,
    ):
        self.client = client
        self.model = model
        self.max_tokens = max_tokens

    async def generate(self, prompt: RoastPrompt) -> str:
        """Generate a roast with Claude. Returns the fallback text when the
        provider answers with no text content."""
        start = time.perf_counter()
        try:
            response = await self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                system=prompt.system,
                messages=[{"role": "user", "content": prompt.user}],
                temperature=prompt.temperature,
                stream=False,
            )
        except Exception as e:
            logger.error("Claude API error: %s", e)
            raise RoastGenerationError("Failed to generate roast") from e
        finally:
            LLM_DURATION.observe(time.perf_counter() - start)

        for block in response.content or []:
            text = getattr(block, "text", None)
            if text:
                return text
        logger.warning("Claude returned no text content")
        return FALLBACK_ROAST


def load_llm_cloud() -> RoastLLM:
    logger.info("Initializing Claude LLM client (model=%s)", settings.claude_model)
    client = anthropic.AsyncAnthropic(
        api_key=settings.anthropic_api_key,
        timeout=settings.claude_timeout_s,
        max_retries=0,
    )
    return RoastLLM(client, settings.claude_model, settings.roast_max_tokens)
