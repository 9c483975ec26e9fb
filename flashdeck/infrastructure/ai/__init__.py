from .ai_model import build_ai_model
from .ai_service import AIService

__all__ = ["AIService", "build_ai_model"]
