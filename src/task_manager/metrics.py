from prometheus_client import Counter, Histogram, REGISTRY


# we check if they are already registered to avoid errors during hot reloads or test runs
def get_or_create_metric(name, documentation, metric_type, **kwargs):
    try:
        return metric_type(name, documentation, **kwargs)
    except ValueError:
        # If it already exists, retrieve it from the registry
        return REGISTRY._names_to_collectors[name]


REQUESTS_TOTAL = get_or_create_metric(
    "taskmgr_requests_total",
    "Total API requests",
    Counter,
    labelnames=["endpoint", "status"],
)

REQUEST_LATENCY_SECONDS = get_or_create_metric(
    "taskmgr_request_latency_seconds",
    "API request latency",
    Histogram,
    labelnames=["endpoint"],
)

ANALYSIS_TOTAL = get_or_create_metric(
    "taskmgr_analysis_total",
    "Task analyses by result source",
    Counter,
    labelnames=["source"],
)

LLM_LATENCY_SECONDS = get_or_create_metric(
    "taskmgr_llm_latency_seconds",
    "Latency of remote completion calls",
    Histogram,
)
