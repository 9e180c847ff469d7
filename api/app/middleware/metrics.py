from prometheus_client import Counter, Histogram
from prometheus_fastapi_instrumentator import Instrumentator

ROASTS = Counter(
    "roastme_roasts_total",
    "Roast requests by level and outcome",
    ["level", "outcome"],
)

DETECTED_LANGUAGE = Counter(
    "roastme_detected_language_total",
    "Detected input language",
    ["language", "script"],
)

LLM_DURATION = Histogram(
    "roastme_llm_duration_seconds",
    "Time spent waiting on the LLM provider",
    buckets=[0.25, 0.5, 1.0, 2.0, 3.0, 5.0, 10.0, 20.0],
)


def setup_metrics(app):
    Instrumentator(
        should_group_status_codes=True,
        should_ignore_untemplated=True,
        excluded_handlers=["/metrics", "/docs", "/openapi.json"],
    ).instrument(app).expose(app, endpoint="/metrics")
