"""JSON formatter for Repo Buddy."""

import json

from ..models import AnalysisResult
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the result as JSON with stable field names."""

    extension = ".json"

    def format(self, result: AnalysisResult) -> str:
        return json.dumps(result.to_dict(), indent=2)
