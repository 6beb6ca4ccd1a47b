"""Data models for LeetCode entities."""

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class ContestQuestionStub:
    """Represents a question as listed inside a contest."""

    question_id: int
    credit: int
    title: str
    title_slug: str


@dataclass(frozen=True)
class Contest:
    """Represents a contest and the questions it contains."""

    id: int
    duration: int
    start_time: int
    title: str
    title_slug: str
    is_virtual: bool
    contains_premium: bool
    registered: bool
    questions: Tuple[ContestQuestionStub, ...] = ()
    description: str = ""
    # reasons for question entries that could not be decoded
    skipped: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Problem:
    """
    Represents a problem in the catalog.

    ``fid`` is the id shown to users, ``id`` the internal one.
    ``percent`` is NaN when nobody has submitted yet.
    """

    category: str
    fid: int
    id: int
    level: int
    locked: bool
    name: str
    percent: float
    slug: str
    starred: bool
    status: str = "Null"
    desc: str = ""

@dataclass(frozen=True)
class Stats:
    """Acceptance statistics of a question."""

    total_accepted: str
    total_submission: str
    total_accepted_raw: int
    total_submission_raw: int
    rate: str

    def to_api(self) -> Dict[str, Any]:
        return {
            "totalAccepted": self.total_accepted,
            "totalSubmission": self.total_submission,
            "totalAcceptedRaw": self.total_accepted_raw,
            "totalSubmissionRaw": self.total_submission_raw,
            "acRate": self.rate,
        }


@dataclass(frozen=True)
class CodeDefinition:
    """Code template for one language."""

    value: str
    text: str
    default_code: str

    def to_api(self) -> Dict[str, Any]:
        return {"value": self.value, "text": self.text, "defaultCode": self.default_code}


@dataclass(frozen=True)
class Param:
    """Function parameter from question metadata."""

    name: str
    type: str


@dataclass(frozen=True)
class MetaData:
    """
    Function signature description of a question.
    Keys other than name/params/return (design problems carry
    ``classname``, ``methods``...) are kept in ``extra`` as
    (key, JSON text) pairs sorted by key, so the record stays hashable.
    """

    return_type: str
    name: Optional[str] = None
    params: Tuple[Param, ...] = ()
    extra: Tuple[Tuple[str, str], ...] = ()

    def extra_value(self, key: str) -> Any:
        for name, text in self.extra:
            if name == key:
                return json.loads(text)
        return None

    def to_api(self) -> Dict[str, Any]:
        data = {name: json.loads(text) for name, text in self.extra}
        if self.name is not None:
            data["name"] = self.name
        if self.params:
            data["params"] = [{"name": p.name, "type": p.type} for p in self.params]
        data["return"] = {"type": self.return_type}
        return data


@dataclass(frozen=True)
class Question:
    """Full detail of a question."""

    content: str
    stats: Stats
    defs: Tuple[CodeDefinition, ...]
    case: str
    all_cases: str
    metadata: MetaData
    test: bool
    t_content: str = ""

    def get_definition(self, lang: str) -> Optional[CodeDefinition]:
        for definition in self.defs:
            if definition.value == lang:
                return definition
        return None

    def to_api(self) -> Dict[str, Any]:
        """Serialize back to the GraphQL shape, embedded fields re-encoded as text."""
        return {
            "content": self.content,
            "stats": json.dumps(self.stats.to_api()),
            "codeDefinition": json.dumps([d.to_api() for d in self.defs]),
            "sampleTestCase": self.case,
            "exampleTestcases": self.all_cases,
            "metaData": json.dumps(self.metadata.to_api()),
            "enableRunCode": self.test,
            "translatedContent": self.t_content,
        }


@dataclass(frozen=True)
class UserIdentity:
    """Represents the logged in user."""

    username: str
    is_premium: bool
