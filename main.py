"""Chat Message Classifier - FastAPI Server."""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from pydantic import BaseModel, ConfigDict, Field

from classifier.corpus import CorpusLoader
from classifier.hybrid import HybridClassifier
from classifier.router import route_message
from config import Settings, get_settings


MODEL_VERSION = "2026-10-17-chat-v1"

ms_per_second = 1000

logger = logging.getLogger(__name__)


class AppState:
    """Application state holding the trained classifier."""

    def __init__(self, classifier: Optional[HybridClassifier] = None, max_message_chars: int = 500):
        self.classifier = classifier
        self.max_message_chars = max_message_chars
        self.startup_time: Optional[float] = None

    @property
    def classifier_ready(self) -> bool:
        return self.classifier is not None and self.classifier.is_trained


def build_state(settings: Settings) -> AppState:
    """Construct the classifier and train it on the configured corpus."""
    state = AppState(max_message_chars=settings.max_message_chars)
    try:
        examples = CorpusLoader(settings.corpus_dir).load()
        classifier = HybridClassifier()
        classifier.train(examples)
        state.classifier = classifier
    except Exception:
        logger.exception("Classifier initialization failed")
    state.startup_time = time.time()
    return state


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Train the classifier on startup, cleanup on shutdown."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.state.classifier_state = build_state(settings)
    yield


app = FastAPI(
    title="Chat Message Classifier",
    description="Hybrid TF-IDF and rule based classification of chat messages",
    version="1.0.0",
    lifespan=lifespan,
)


def get_app_state(request: Request) -> AppState:
    return request.app.state.classifier_state


class ClassifyRequest(BaseModel):
    """Request body for classification."""

    message: str = Field(..., min_length=1)


class ClassifyResponse(BaseModel):
    """Response body for classification.

    Scores are the raw combined category scores; confidence is the winning
    category's share of their total as an integer percentage.
    """

    model_config = ConfigDict(protected_namespaces=())

    category: str
    confidence: int
    scores: dict[str, float]
    rule: Optional[str]
    processing_time_ms: int
    model_version: str


class HealthResponse(BaseModel):
    """Response body for health check."""

    model_config = ConfigDict(protected_namespaces=())

    status: str
    model_version: str
    model_trained: bool
    training_examples: int
    uptime_seconds: float


@app.post("/classify", response_model=ClassifyResponse)
def classify(request: ClassifyRequest, state: AppState = Depends(get_app_state)) -> ClassifyResponse:
    """Classify a chat message into a handling category."""
    start_time = time.time()

    if not state.classifier_ready:
        raise HTTPException(status_code=503, detail="Classifier not initialized")

    text = request.message[:state.max_message_chars]
    result = route_message(text, state.classifier)

    processing_time_ms = int((time.time() - start_time) * ms_per_second)

    return ClassifyResponse(
        category=result["category"],
        confidence=result["confidence"],
        scores=result["scores"],
        rule=result["rule"],
        processing_time_ms=processing_time_ms,
        model_version=MODEL_VERSION,
    )


@app.get("/health", response_model=HealthResponse)
def health(state: AppState = Depends(get_app_state)) -> HealthResponse:
    """Health check endpoint. Returns 200 only if the classifier is trained."""
    uptime = time.time() - state.startup_time if state.startup_time else 0
    if not state.classifier_ready:
        raise HTTPException(status_code=503, detail="Classifier not trained")
    return HealthResponse(
        status="healthy",
        model_version=MODEL_VERSION,
        model_trained=True,
        training_examples=state.classifier.training_size,
        uptime_seconds=uptime,
    )
