# telemetry.py
from prometheus_fastapi_instrumentator import Instrumentator
from fastapi import FastAPI

def init_telemetry(app: FastAPI) -> None:
    # health probes and the metrics endpoint itself are not measured
    Instrumentator(excluded_handlers=["/metrics", "/livez", "/readyz"]).instrument(app).expose(
        app, include_in_schema=False
    )
