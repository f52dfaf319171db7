from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict


class CandidateKind(str, Enum):
    kanji = "kanji"
    hiragana = "hiragana"
    katakana = "katakana"
    original = "original"


CANDIDATE_LABELS = {
    CandidateKind.kanji: "AI推測 (Kanji)",
    CandidateKind.hiragana: "ひらがな",
    CandidateKind.katakana: "カタカナ",
    CandidateKind.original: "英語 (English)",
}


class Candidate(BaseModel):
    kind: CandidateKind
    text: str
    label: str
    model_config = ConfigDict(extra="forbid", frozen=True)


class ConversionCandidates(BaseModel):
    original: str
    hiragana: str
    katakana: str
    kanji: Optional[str] = None  # AI suggestion, None when unavailable
    model_config = ConfigDict(extra="forbid")

    def options(self) -> List[Candidate]:
        """Selectable alternatives in display order (kanji first when present)."""
        if not self.original:
            return []

        ordered = [
            (CandidateKind.kanji, self.kanji),
            (CandidateKind.hiragana, self.hiragana),
            (CandidateKind.katakana, self.katakana),
            (CandidateKind.original, self.original),
        ]
        return [
            Candidate(kind=kind, text=text, label=CANDIDATE_LABELS[kind])
            for kind, text in ordered
            if text
        ]
