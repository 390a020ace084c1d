from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator, model_validator

EMOTION_NAMES = ("Anger", "Sadness", "Joy", "Fear", "Surprise")


class Provider(str, Enum):
    OPENAI = "openai"
    GEMINI = "gemini"
    OPENROUTER = "openrouter"


class AnalysisRequest(BaseModel):
    text: str
    model: Provider
    openRouterModel: Optional[str] = None

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Please enter an argument to analyze.")
        return value

    @model_validator(mode="after")
    def variant_matches_provider(self) -> "AnalysisRequest":
        if self.model is Provider.OPENROUTER:
            if not (self.openRouterModel and self.openRouterModel.strip()):
                raise ValueError("openRouterModel is required when model is 'openrouter'.")
            self.openRouterModel = self.openRouterModel.strip()
        else:
            self.openRouterModel = None
        return self

    @property
    def history_label(self) -> str:
        """Key the client files this analysis under in its local history (sent as X-History-Key)."""
        if self.model is Provider.OPENROUTER:
            return f"openrouter-{self.openRouterModel}"
        return self.model.value


class Emotions(BaseModel):
    model_config = ConfigDict(extra="forbid")

    Anger: StrictInt = Field(ge=1, le=5)
    Sadness: StrictInt = Field(ge=1, le=5)
    Joy: StrictInt = Field(ge=1, le=5)
    Fear: StrictInt = Field(ge=1, le=5)
    Surprise: StrictInt = Field(ge=1, le=5)


class AnalysisResult(BaseModel):
    claim: StrictStr
    premises: List[StrictStr]
    emotions: Emotions


class ProviderInfo(BaseModel):
    name: Provider
    configured: bool
    model: Optional[str] = None
    variants: List[str] = []


class ErrorResponse(BaseModel):
    detail: str
