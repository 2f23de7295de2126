"""Prometheus metrics configuration"""

from prometheus_client import Counter, Histogram, Info
from prometheus_fastapi_instrumentator import Instrumentator
from typing import Callable
import time
from functools import wraps

# Application info
app_info = Info('catalog_recommender', 'Catalog Recommendation Service Information')
app_info.info({
    'version': '1.0.0',
    'service': 'catalog-recommender-backend'
})

# Recommendation metrics
recommendations_generated_total = Counter(
    'recommendations_generated_total',
    'Total recommendation requests by outcome',
    ['outcome']
)

recommendation_generation_duration_seconds = Histogram(
    'recommendation_generation_duration_seconds',
    'Time taken to generate recommendations',
    ['stage']
)

ranked_items_count = Histogram(
    'ranked_items_count',
    'Number of items in a ranked recommendation list',
    buckets=(0, 1, 5, 10, 25, 50, 100, 250, 500)
)


def setup_metrics(app):
    """
    Setup Prometheus metrics for FastAPI app

    Args:
        app: FastAPI application instance
    """
    instrumentator = Instrumentator(
        should_group_status_codes=False,
        should_ignore_untemplated=True,
        should_respect_env_var=True,
        should_instrument_requests_inprogress=True,
        excluded_handlers=["/metrics"],
        env_var_name="ENABLE_METRICS",
        inprogress_name="http_requests_inprogress",
        inprogress_labels=True
    )

    instrumentator.instrument(app).expose(app, endpoint="/metrics")

    return instrumentator


def track_recommendation_time(stage: str):
    """
    Decorator to track how long a recommendation stage takes

    Usage:
        @track_recommendation_time("engine")
        def recommend():
            pass
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                return func(*args, **kwargs)
            finally:
                duration = time.time() - start_time
                recommendation_generation_duration_seconds.labels(
                    stage=stage
                ).observe(duration)

        return wrapper

    return decorator


def record_bypass():
    """Record a request that fell back to the default listing"""
    recommendations_generated_total.labels(outcome="bypass").inc()


def record_ranked(count: int):
    """Record a ranked recommendation list"""
    recommendations_generated_total.labels(outcome="ranked").inc()
    ranked_items_count.observe(count)
