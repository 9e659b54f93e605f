"""Validated input for rendering a pleading document."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from pleadgrid.preprocess.normalizer import normalize
from pleadgrid.render.caption import Caption

REQUIRED_FIELDS = (
    "court_name",
    "case_number",
    "petitioner",
    "respondent",
    "document_title",
    "body_text",
)


class PleadingRequest(BaseModel):
    """Caption details and body text of one pleading.

    Caption fields are trimmed with line endings folded to ``\\n``; the body is
    run through :func:`~pleadgrid.preprocess.normalizer.normalize`.  Missing
    required fields are reported together in a single validation error.
    """

    court_name: str = ""
    county: str = ""
    case_number: str = ""
    petitioner: str = ""
    respondent: str = ""
    filing_party: str = ""
    attorney_name: str = ""
    attorney_bar: str = ""
    attorney_address: str = ""
    document_title: str = ""
    body_text: str = ""

    model_config = ConfigDict(extra="forbid")

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_scalars(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator(
        "court_name",
        "county",
        "case_number",
        "petitioner",
        "respondent",
        "filing_party",
        "attorney_name",
        "attorney_bar",
        "attorney_address",
        "document_title",
    )
    @classmethod
    def _clean_field(cls, value: str) -> str:
        return value.replace("\r\n", "\n").replace("\r", "\n").strip()

    @field_validator("body_text")
    @classmethod
    def _normalize_body(cls, value: str) -> str:
        return normalize(value)

    @model_validator(mode="after")
    def _check_required(self) -> "PleadingRequest":
        missing = [name for name in REQUIRED_FIELDS if not getattr(self, name).strip()]
        if missing:
            raise ValueError("missing required fields: " + ", ".join(missing))
        return self

    @property
    def court_line(self) -> str:
        return f"{self.court_name}, {self.county}" if self.county else self.court_name

    def caption(self) -> Caption:
        attorney: list[str] = []
        if self.attorney_name:
            attorney.append(self.attorney_name)
        if self.attorney_bar:
            attorney.append(f"State Bar No.: {self.attorney_bar}")
        if self.attorney_address:
            attorney.extend(self.attorney_address.split("\n"))
        if self.filing_party:
            attorney.append(f"Attorney for: {self.filing_party}")

        lines = [
            *attorney,
            "",
            self.court_line,
            "",
            f"{self.petitioner},",
            "Petitioner,",
            "v.",
            f"{self.respondent},",
            "Respondent.",
            "",
            f"Case No.: {self.case_number}",
        ]
        return Caption(title=self.document_title, court_line=self.court_line, lines=tuple(lines))


__all__ = ["REQUIRED_FIELDS", "PleadingRequest"]
