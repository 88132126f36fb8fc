import pytest

from voxtral.mistral.pricing import ModelPricing, ModelPricingService
from voxtral.mistral.templates import BUILT_IN_TEMPLATES, auto_run_templates


def test_exact_match_returns_pricing():
    pricing = ModelPricingService().pricing_for("mistral-small-latest")
    assert pricing is not None
    assert pricing.input_price_per_million == 0.1
    assert pricing.output_price_per_million == 0.3


def test_prefix_match_for_versioned_ids():
    pricing = ModelPricingService().pricing_for("mistral-small-2501")
    assert pricing is not None
    assert pricing.model_id == "mistral-small-latest"

    nemo = ModelPricingService().pricing_for("open-mistral-nemo-2407")
    assert nemo.model_id == "open-mistral-nemo"


def test_unknown_model_returns_none():
    assert ModelPricingService().pricing_for("nonexistent-model") is None


def test_estimated_cost_per_memo_formatting():
    # (500 * 0.1 + 200 * 0.3) / 1e6 = 0.00011
    assert ModelPricing("cheap", 0.1, 0.3).estimated_cost_per_memo == "<$0.001"
    # (500 * 2.0 + 200 * 6.0) / 1e6 = 0.0022
    assert ModelPricing("pricey", 2.0, 6.0).estimated_cost_per_memo == "$0.002"


def test_transcription_cost():
    service = ModelPricingService()
    assert service.transcription_cost_per_minute == 0.003
    assert service.transcription_cost(120) == pytest.approx(0.006)
    assert service.transcription_cost(-5) == 0.0


def test_custom_pricing_table():
    service = ModelPricingService({"x-latest": ModelPricing("x-latest", 1.0, 1.0)})
    assert service.pricing_for("x-2") is not None
    assert service.pricing_for("mistral-small-latest") is None


def test_built_in_templates():
    names = [t.name for t in BUILT_IN_TEMPLATES]
    assert names == ["Summary", "Todo List", "Translate to English", "Journal Entry"]
    assert [t.sort_order for t in BUILT_IN_TEMPLATES] == [0, 1, 2, 3]
    assert [t.name for t in auto_run_templates()] == ["Summary"]
    assert all(t.system_prompt for t in BUILT_IN_TEMPLATES)
