from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Dict, List, Literal, Optional, Tuple
Dimension = Literal["EI","SN","TF","JP"]
FunctionLabel = Literal["Te","Ti","Fe","Fi","Se","Si","Ne","Ni"]
ReportSource = Literal["generated","static","template"]
SessionPhase = Literal["collecting","resolving","complete","reset"]
@dataclass(frozen=True)
class Question:
    id: int; text: str; dimension: Dimension
    reverse: bool = False
@dataclass(frozen=True)
class Response:
    question_id: int; value: int
@dataclass(frozen=True)
class TraitScores:
    extraversion: int = 50
    sensing: int = 50
    thinking: int = 50
    judging: int = 50

    def by_dimension(self) -> Dict[str, int]:
        return {"EI": self.extraversion, "SN": self.sensing, "TF": self.thinking, "JP": self.judging}

    def to_dict(self) -> Dict[str, int]:
        return {
            "Extraversion": self.extraversion,
            "Sensing": self.sensing,
            "Thinking": self.thinking,
            "Judging": self.judging,
        }
@dataclass(frozen=True)
class CognitiveStack:
    dominant: FunctionLabel
    auxiliary: FunctionLabel
    tertiary: FunctionLabel
    inferior: FunctionLabel
    explanation: str

    def labels(self) -> List[str]:
        return [self.dominant, self.auxiliary, self.tertiary, self.inferior]

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
@dataclass(frozen=True)
class CognitiveSummary:
    """Narrative form of the stack: full function names, as shown in reports."""
    dominant: str; auxiliary: str; tertiary: str; inferior: str; explanation: str
@dataclass(frozen=True)
class PsychologyDeepDive:
    subconscious: str; paradox: str
    motivations: Tuple[str, ...] = ()
    fears: Tuple[str, ...] = ()
@dataclass(frozen=True)
class CareerVector:
    title: str; description: str
    roles: Tuple[str, ...] = ()
@dataclass(frozen=True)
class LifestyleVector:
    hobbies: Tuple[str, ...]; environment: str; stress_relief: str
@dataclass(frozen=True)
class LifeInsightDetail:
    summary: str
    strengths: Tuple[str, ...]
    challenges: Tuple[str, ...]
    actionable_tip: str
@dataclass(frozen=True)
class LifeInsights:
    work: LifeInsightDetail
    friendships: LifeInsightDetail
    relationships: LifeInsightDetail
    stress: LifeInsightDetail
    growth: str
    unhealthy: str
@dataclass(frozen=True)
class Report:
    type_code: str
    type_name: str
    summary: str
    strengths: Tuple[str, ...]
    weaknesses: Tuple[str, ...]
    psychology: PsychologyDeepDive
    career: CareerVector
    lifestyle: LifestyleVector
    cognitive_functions: CognitiveSummary
    life_insights: LifeInsights
    source: ReportSource = "static"

    def to_dict(self) -> Dict[str, object]:
        """Camel-cased payload, the same field set the report generator returns."""
        def _detail(d: LifeInsightDetail) -> Dict[str, object]:
            return {"summary": d.summary, "strengths": list(d.strengths),
                    "challenges": list(d.challenges), "actionableTip": d.actionable_tip}
        li = self.life_insights
        return {
            "typeCode": self.type_code,
            "typeName": self.type_name,
            "summary": self.summary,
            "strengths": list(self.strengths),
            "weaknesses": list(self.weaknesses),
            "psychology": {"subconscious": self.psychology.subconscious, "paradox": self.psychology.paradox,
                           "motivations": list(self.psychology.motivations), "fears": list(self.psychology.fears)},
            "career": {"title": self.career.title, "description": self.career.description,
                       "roles": list(self.career.roles)},
            "lifestyle": {"hobbies": list(self.lifestyle.hobbies),
                          "environment": self.lifestyle.environment,
                          "stressRelief": self.lifestyle.stress_relief},
            "cognitiveFunctions": asdict(self.cognitive_functions),
            "lifeInsights": {
                "work": _detail(li.work),
                "friendships": _detail(li.friendships),
                "relationships": _detail(li.relationships),
                "stress": _detail(li.stress),
                "growth": li.growth,
                "unhealthy": li.unhealthy,
            },
            "source": self.source,
        }
@dataclass(frozen=True)
class Insight:
    title: str; content: str
@dataclass
class AssessmentResult:
    scores: TraitScores
    type_code: str
    stack: CognitiveStack
    report: Report
    insights: List[Insight] = field(default_factory=list)
    fallback_reason: Optional[str] = None

    def to_dict(self) -> Dict[str, object]:
        return {
            "scores": self.scores.to_dict(),
            "typeCode": self.type_code,
            "stack": self.stack.to_dict(),
            "report": self.report.to_dict(),
            "insights": [asdict(i) for i in self.insights],
            "fallbackReason": self.fallback_reason,
        }
