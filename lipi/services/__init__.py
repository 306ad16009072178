"""Services - translation orchestration over providers and script conversion."""

from lipi.services.translator import (
    TranslationOrchestrator,
    build_orchestrator,
    resolve_route,
)

__all__ = [
    "TranslationOrchestrator",
    "build_orchestrator",
    "resolve_route",
]
