"""Content density data model - age bands driving vocabulary and page budgets."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DensityTier(str, Enum):
    """Discrete age band. Declaration order is the tier order."""

    VERY_SIMPLE = "very_simple"
    SIMPLE = "simple"
    MODERATE = "moderate"
    ADVANCED = "advanced"
    PRETEEN = "preteen"

    @property
    def rank(self) -> int:
        """Position in the total order, 0 for VERY_SIMPLE."""
        return list(DensityTier).index(self)


class WordRange(BaseModel):
    """Inclusive min/max bound."""

    model_config = ConfigDict(frozen=True)

    min: int = Field(..., ge=1)
    max: int = Field(..., ge=1)

    @model_validator(mode="after")
    def _check_order(self) -> "WordRange":
        if self.min > self.max:
            raise ValueError(f"min {self.min} exceeds max {self.max}")
        return self

    def __str__(self) -> str:
        return f"{self.min}-{self.max}"


class DensityExamples(BaseModel):
    """Worked examples shown to the model."""

    model_config = ConfigDict(frozen=True)

    good_words: tuple[str, ...] = ()
    avoid_words: tuple[str, ...] = ()
    good_sentence: str = ""
    bad_sentence: str = ""


class DensityConfig(BaseModel):
    """Generation style for one density tier. Declarative prompt data only."""

    model_config = ConfigDict(frozen=True)

    tier: DensityTier
    label: str = Field(..., description="e.g. Ages 3-4")
    vocabulary_level: str
    vocabulary_description: str
    sentence_words: WordRange = Field(..., description="Words per sentence")
    sentence_structure: str
    words_per_page: WordRange
    sentences_per_page: WordRange
    tense: str = "past tense"
    dialogue_style: str
    narrative_technique: str
    themes: tuple[str, ...] = ()
    emotions: tuple[str, ...] = ()
    conflict_types: tuple[str, ...] = ()
    examples: DensityExamples = Field(default_factory=DensityExamples)
