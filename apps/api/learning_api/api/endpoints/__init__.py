from __future__ import annotations

from learning_api.api.endpoints import learning, study

__all__ = ["learning", "study"]
