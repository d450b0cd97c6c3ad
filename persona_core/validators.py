"""Schema for reports returned by the generator.

The generator must return every field of the report, non-empty. Anything else
is rejected as a whole; callers fall back to the static table rather than
merging a partial payload.
"""
from __future__ import annotations

import json
from typing import Annotated, Any, List

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, ValidationError

from .types import (
    CareerVector,
    CognitiveSummary,
    LifeInsightDetail,
    LifeInsights,
    LifestyleVector,
    PsychologyDeepDive,
    Report,
)

Text = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
TextList = Annotated[List[Text], Field(min_length=1)]


class ReportSchemaError(ValueError):
    """Generated payload is empty, not JSON, or does not match the report schema."""

    def __init__(self, reason: str, detail: str = ""):
        super().__init__(f"{reason}: {detail}" if detail else reason)
        self.reason = reason


class _Model(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)


class PsychologyModel(_Model):
    subconscious: Text
    paradox: Text
    motivations: TextList
    fears: TextList


class CareerModel(_Model):
    title: Text
    description: Text
    roles: TextList


class LifestyleModel(_Model):
    hobbies: TextList
    environment: Text
    stressRelief: Text


class CognitiveModel(_Model):
    dominant: Text
    auxiliary: Text
    tertiary: Text
    inferior: Text
    explanation: Text


class LifeInsightModel(_Model):
    summary: Text
    strengths: TextList
    challenges: TextList
    actionableTip: Text


class LifeInsightsModel(_Model):
    work: LifeInsightModel
    friendships: LifeInsightModel
    relationships: LifeInsightModel
    stress: LifeInsightModel
    growth: Text
    unhealthy: Text


class GeneratedReport(_Model):
    typeName: Text
    summary: Text
    strengths: TextList
    weaknesses: TextList
    psychology: PsychologyModel
    career: CareerModel
    lifestyle: LifestyleModel
    cognitiveFunctions: CognitiveModel
    lifeInsights: LifeInsightsModel


def _detail(m: LifeInsightModel) -> LifeInsightDetail:
    return LifeInsightDetail(summary=m.summary, strengths=tuple(m.strengths),
                             challenges=tuple(m.challenges), actionable_tip=m.actionableTip)


def to_report(model: GeneratedReport, type_code: str) -> Report:
    li = model.lifeInsights
    return Report(
        type_code=type_code,
        type_name=model.typeName,
        summary=model.summary,
        strengths=tuple(model.strengths),
        weaknesses=tuple(model.weaknesses),
        psychology=PsychologyDeepDive(subconscious=model.psychology.subconscious,
                                      paradox=model.psychology.paradox,
                                      motivations=tuple(model.psychology.motivations),
                                      fears=tuple(model.psychology.fears)),
        career=CareerVector(title=model.career.title, description=model.career.description,
                            roles=tuple(model.career.roles)),
        lifestyle=LifestyleVector(hobbies=tuple(model.lifestyle.hobbies),
                                  environment=model.lifestyle.environment,
                                  stress_relief=model.lifestyle.stressRelief),
        cognitive_functions=CognitiveSummary(**model.cognitiveFunctions.model_dump()),
        life_insights=LifeInsights(
            work=_detail(li.work),
            friendships=_detail(li.friendships),
            relationships=_detail(li.relationships),
            stress=_detail(li.stress),
            growth=li.growth,
            unhealthy=li.unhealthy,
        ),
        source="generated",
    )


def parse_report_payload(raw: Any, type_code: str) -> Report:
    """
    Validate a generator reply and build a Report carrying `type_code`.
    Raises ReportSchemaError with reason "empty", "invalid_json" or "schema".
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise ReportSchemaError("empty")
    data = raw
    if isinstance(raw, (str, bytes)):
        try:
            data = json.loads(raw)
        except ValueError as e:
            raise ReportSchemaError("invalid_json", str(e)) from e
    if not isinstance(data, dict) or not data:
        raise ReportSchemaError("schema", "expected a JSON object")
    try:
        model = GeneratedReport.model_validate(data)
    except ValidationError as e:
        raise ReportSchemaError("schema", f"{e.error_count()} field error(s)") from e
    return to_report(model, type_code)
