from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Average memo: ~500 input tokens (transcript) + ~200 output tokens (summary)
MEMO_INPUT_TOKENS = 500
MEMO_OUTPUT_TOKENS = 200

TRANSCRIPTION_COST_PER_MINUTE = 0.003


@dataclass(frozen=True)
class ModelPricing:
    model_id: str
    input_price_per_million: float
    output_price_per_million: float

    @property
    def estimated_cost_per_memo(self) -> str:
        cost = (
            MEMO_INPUT_TOKENS * self.input_price_per_million
            + MEMO_OUTPUT_TOKENS * self.output_price_per_million
        ) / 1_000_000
        if cost < 0.001:
            return "<$0.001"
        return f"${cost:.3f}"


# USD per million tokens, from mistral.ai/pricing
DEFAULT_PRICING = {
    p.model_id: p
    for p in (
        ModelPricing("mistral-large-latest", 2.0, 6.0),
        ModelPricing("mistral-small-latest", 0.1, 0.3),
        ModelPricing("pixtral-large-latest", 2.0, 6.0),
        ModelPricing("open-mistral-nemo", 0.15, 0.15),
        ModelPricing("ministral-8b-latest", 0.1, 0.1),
    )
}


class ModelPricingService:
    def __init__(self, pricing: dict[str, ModelPricing] | None = None):
        self.pricing = dict(DEFAULT_PRICING if pricing is None else pricing)
        self.transcription_cost_per_minute = TRANSCRIPTION_COST_PER_MINUTE

    def pricing_for(self, model_id: str) -> Optional[ModelPricing]:
        """Exact match first, then prefix match on the key without ``-latest``.

        ``mistral-small-2501`` resolves to ``mistral-small-latest``.
        """

        exact = self.pricing.get(model_id)
        if exact is not None:
            return exact
        for key, value in self.pricing.items():
            if model_id.startswith(key.replace("-latest", "")):
                return value
        return None

    def transcription_cost(self, duration_s: float) -> float:
        return max(duration_s, 0.0) / 60.0 * self.transcription_cost_per_minute
