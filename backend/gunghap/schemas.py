import re
import unicodedata

from pydantic import BaseModel, Field, field_validator, model_validator

from .config import settings

# Composed syllables only; no jamo, spaces, Latin or digits.
HANGUL_NAME_RE = re.compile(r"^[가-힣]+$")

MSG_TOO_SHORT = "두 글자 이상 입력하세요."
MSG_HANGUL_ONLY = "한글만 입력하세요. 중간 공백은 허용되지 않습니다."
MSG_LENGTH_DIFF = "두 이름의 글자 수 차이는 최대 1이어야 합니다."


def normalize_name(v: str) -> str:
    return unicodedata.normalize("NFC", v.strip())


def check_hangul_name(v: str) -> str:
    v = normalize_name(v)
    if len(v) < 2:
        raise ValueError(MSG_TOO_SHORT)
    if len(v) > settings.max_name_length:
        raise ValueError(f"이름은 최대 {settings.max_name_length}글자까지 입력할 수 있습니다.")
    if not HANGUL_NAME_RE.match(v):
        raise ValueError(MSG_HANGUL_ONLY)
    return v


class CompatNamesRequest(BaseModel):
    name_1: str = Field(max_length=200)
    name_2: str = Field(max_length=200)

    @field_validator("name_1", "name_2")
    @classmethod
    def name_is_hangul(cls, v: str) -> str:
        return check_hangul_name(v)

    @model_validator(mode="after")
    def lengths_close(self) -> "CompatNamesRequest":
        if abs(len(self.name_1) - len(self.name_2)) > 1:
            raise ValueError(MSG_LENGTH_DIFF)
        return self


class CompatNamesResponse(BaseModel):
    name_1: str
    name_2: str
    strokes_1: list[int]
    strokes_2: list[int]
    interleaved: list[int]
    interleaved_syllables: list[str]
    rows: list[list[int]]
    score: int = Field(ge=0, le=100)


class DecomposeRequest(BaseModel):
    name: str = Field(max_length=200)

    @field_validator("name")
    @classmethod
    def name_is_hangul(cls, v: str) -> str:
        return check_hangul_name(v)


class SyllableBreakdownResponse(BaseModel):
    syllable: str
    initial_index: int
    vowel_index: int
    final_index: int
    initial_strokes: int | None
    vowel_strokes: int | None
    final_strokes: int | None
    total_strokes: int | None


class DecomposeResponse(BaseModel):
    name: str
    syllables: list[SyllableBreakdownResponse]
