import time
from contextlib import asynccontextmanager
from datetime import datetime

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Path
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

from logging_config import setup_logging

from .constants import HOST, MAX_FACTORIAL_INPUT, PORT, SERVICE_NAME, SERVICE_VERSION
from .container import Container
from .interfaces import IFactorialCalculator
from .models import FactorialReport, FactorialRequest

logger = setup_logging(SERVICE_NAME)

# ============================================================================
# PROMETHEUS METRICS
# ============================================================================

FACTORIAL_REQUESTS_TOTAL = Counter(
    'factorial_requests_total', 'Total factorial requests', ['endpoint', 'status']
)
FACTORIAL_COMPUTE_SECONDS = Histogram(
    'factorial_compute_seconds', 'Time spent computing both strategies',
    buckets=[0.0001, 0.001, 0.01, 0.1, 1]
)

# DI Container
container = Container()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle manager"""
    logger.info(f"Factorial Calculator started (max input {MAX_FACTORIAL_INPUT})")
    yield
    logger.info("Factorial Calculator stopped")


app = FastAPI(
    title="Factorial Calculator",
    description="API for computing factorials recursively and iteratively",
    version=SERVICE_VERSION,
    lifespan=lifespan
)


def get_calculator() -> IFactorialCalculator:
    return container.calculator()


def _compute(n: int, calculator: IFactorialCalculator, endpoint: str) -> FactorialReport:
    start_time = time.time()
    try:
        report = calculator.report(n)
    except (ValueError, TypeError) as e:
        FACTORIAL_REQUESTS_TOTAL.labels(endpoint=endpoint, status="400").inc()
        logger.warning(f"Rejected n={n}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        FACTORIAL_REQUESTS_TOTAL.labels(endpoint=endpoint, status="500").inc()
        logger.exception(f"Unexpected error computing factorial of {n}")
        raise HTTPException(status_code=500, detail="Internal server error")

    FACTORIAL_COMPUTE_SECONDS.observe(time.time() - start_time)
    FACTORIAL_REQUESTS_TOTAL.labels(endpoint=endpoint, status="200").inc()
    logger.info(f"Factorial of {n} computed, consistent={report.consistent}")
    return report


@app.post("/factorial", response_model=FactorialReport)
def factorial_endpoint(
    request: FactorialRequest,
    calculator: IFactorialCalculator = Depends(get_calculator)
) -> FactorialReport:
    """Endpoint for computing n! with both strategies.

    Args:
        request: Request with n (0 <= n <= MAX_FACTORIAL_INPUT).

    Returns:
        FactorialReport: Both results and whether they agree.

    Raises:
        HTTPException: 400 if the calculator rejects n, 500 on unexpected errors.
    """
    return _compute(request.n, calculator, "/factorial")


@app.get("/factorial/{n}", response_model=FactorialReport)
def factorial_path_endpoint(
    n: int = Path(..., description="Non-negative integer whose factorial is computed"),
    calculator: IFactorialCalculator = Depends(get_calculator)
) -> FactorialReport:
    """Same as POST /factorial with n taken from the path.

    The path is not range-checked, so out-of-range values reach the
    calculator and come back as 400.
    """
    return _compute(n, calculator, "/factorial/{n}")


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "timestamp": datetime.now().isoformat()
    }


@app.get("/metrics")
async def metrics():
    """Prometheus metrics endpoint"""
    return PlainTextResponse(generate_latest(), media_type=CONTENT_TYPE_LATEST)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "Factorial Calculator",
        "version": SERVICE_VERSION,
        "description": "Computes n! recursively and iteratively",
        "max_input": MAX_FACTORIAL_INPUT,
        "endpoints": {
            "factorial": "POST /factorial - body {\"n\": int}",
            "factorial_path": "GET /factorial/{n}",
            "health": "GET /health",
            "metrics": "GET /metrics"
        }
    }


if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
