from typing import Literal

from pydantic import BaseModel

from password_advisor.services.analyzer import AnalysisResult


class AnalysisResponse(BaseModel):
    strength: Literal['Weak', 'Moderate', 'Strong', 'N/A']
    suggestion: str

    @classmethod
    def from_result(cls, result: AnalysisResult) -> 'AnalysisResponse':
        return cls(strength=result.strength, suggestion=result.suggestion)
