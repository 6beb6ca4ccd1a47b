"""Parsers turning raw LeetCode JSON responses into models.

Every parser has three outcomes:

* ``ParseError`` is raised when a required field is missing or mistyped,
  including JSON documents embedded as text that fail to decode.
* ``None`` (``[]`` for tags) is returned when the API marks the data as
  legitimately absent with an explicit ``null``: premium-gated content,
  anonymous user, unknown tag.
* A model is returned otherwise.

Parsers never raise anything else on malformed input. Each accepts an
optional ``logger``; the module logger is used when none is given.
"""

import json
import logging
import math
from typing import Any, Callable, List, Optional, Tuple

from .json_nav import (
    MISSING,
    as_bool,
    as_dict,
    as_float,
    as_int,
    as_int_text,
    as_list,
    as_str,
    as_str_list,
    loads_text,
    lookup,
)
from .models import (
    CodeDefinition,
    Contest,
    ContestQuestionStub,
    MetaData,
    Param,
    Problem,
    Question,
    Stats,
    UserIdentity,
)


log = logging.getLogger(__name__)

STATUS_DEFAULT = "Null"

# Max divergence between the percent computed from raw counts and the one
# parsed from the rounded ``acRate`` display string.
PERCENT_TOLERANCE = 0.5

_DIFFICULTY_LEVELS = {"E": 1, "M": 2, "H": 3}
_METADATA_KEYS = ("name", "params", "return")


class ParseError(ValueError):
    """Raised when a response does not have the expected shape."""

    def __init__(self, field: str, reason: str = "missing or invalid field"):
        super().__init__(f"{reason}: {field}")
        self.field = field
        self.reason = reason


def _need(value: Any, where: str) -> Any:
    if value is None or value is MISSING:
        raise ParseError(where)
    return value


def _field(node: Any, key: str, coerce: Callable[[Any], Any], where: str) -> Any:
    return _need(coerce(lookup(node, key)), f"{where}.{key}" if where else key)


def difficulty_level(word: str) -> int:
    """Map a GraphQL difficulty word to a level: Easy/Medium/Hard -> 1/2/3, else 0."""
    return _DIFFICULTY_LEVELS.get(word[:1], 0)


def acceptance_percent(accepted: float, submitted: float) -> float:
    """Accepted over submitted, in percent. NaN when nothing was submitted."""
    if submitted == 0:
        return math.nan
    return accepted / submitted * 100


def rate_percent(rate: str) -> float:
    """Parse a display rate such as ``"51.4%"``."""
    text = rate[:-1] if rate.endswith("%") else rate
    try:
        return float(text)
    except ValueError:
        raise ParseError("stats.acRate", f"invalid rate {rate!r}") from None


# --- contests ---------------------------------------------------------------


def decode_contest_question(value: Any, where: str = "question") -> ContestQuestionStub:
    node = _need(as_dict(value), where)
    return ContestQuestionStub(
        question_id=_field(node, "question_id", as_int, where),
        credit=_field(node, "credit", as_int, where),
        title=_field(node, "title", as_str, where),
        title_slug=_field(node, "title_slug", as_str, where),
    )


def parse_contest(data: Any, logger: Optional[logging.Logger] = None) -> Contest:
    """
    Parse the contest info endpoint.
    Question entries that fail to decode are skipped and listed in ``Contest.skipped``.
    """
    logger = logger or log
    contest = _need(as_dict(lookup(data, "contest")), "contest")
    entries = _need(as_list(lookup(data, "questions")), "questions")

    questions = []
    skipped = []
    for index, entry in enumerate(entries):
        try:
            questions.append(decode_contest_question(entry, f"questions[{index}]"))
        except ParseError as exc:
            logger.warning("Skipping contest question: %s", exc)
            skipped.append(str(exc))

    result = Contest(
        id=_field(contest, "id", as_int, "contest"),
        duration=_field(contest, "duration", as_int, "contest"),
        start_time=_field(contest, "start_time", as_int, "contest"),
        title=_field(contest, "title", as_str, "contest"),
        title_slug=_field(contest, "title_slug", as_str, "contest"),
        is_virtual=_field(contest, "is_virtual", as_bool, "contest"),
        contains_premium=_field(data, "containsPremium", as_bool, ""),
        registered=_field(data, "registered", as_bool, ""),
        questions=tuple(questions),
        description=as_str(lookup(contest, "description")) or "",
        skipped=tuple(skipped),
    )
    logger.debug(
        "Parsed contest %s with %d questions", result.title_slug, len(result.questions)
    )
    return result


# --- problem catalog ----------------------------------------------------------


def parse_problems(
    problems: List[Problem], data: Any, logger: Optional[logging.Logger] = None
) -> int:
    """
    Append one Problem per ``stat_status_pairs`` entry to ``problems``.

    Returns the number appended. A malformed pair raises ParseError and stops
    this call; problems appended before it are left in place.
    """
    logger = logger or log
    pairs = _need(as_list(lookup(data, "stat_status_pairs")), "stat_status_pairs")
    category = _field(data, "category_slug", as_str, "")

    added = 0
    for index, pair in enumerate(pairs):
        where = f"stat_status_pairs[{index}]"
        stat = _need(as_dict(lookup(pair, "stat")), f"{where}.stat")
        total_acs = _field(stat, "total_acs", as_float, f"{where}.stat")
        total_submitted = _field(stat, "total_submitted", as_float, f"{where}.stat")

        problems.append(
            Problem(
                category=category,
                fid=_field(stat, "frontend_question_id", as_int, f"{where}.stat"),
                id=_field(stat, "question_id", as_int, f"{where}.stat"),
                level=_need(as_int(lookup(pair, "difficulty", "level")), f"{where}.difficulty.level"),
                locked=_field(pair, "paid_only", as_bool, where),
                name=_field(stat, "question__title", as_str, f"{where}.stat"),
                percent=acceptance_percent(total_acs, total_submitted),
                slug=_field(stat, "question__title_slug", as_str, f"{where}.stat"),
                starred=_field(pair, "is_favor", as_bool, where),
                status=as_str(lookup(pair, "status")) or STATUS_DEFAULT,
            )
        )
        added += 1

    logger.debug("Parsed %d %s problems", added, category)
    return added


# --- question detail ------------------------------------------------------------


def decode_stats(value: Any) -> Stats:
    node = _need(as_dict(loads_text(value)), "stats")
    return Stats(
        total_accepted=_field(node, "totalAccepted", as_str, "stats"),
        total_submission=_field(node, "totalSubmission", as_str, "stats"),
        total_accepted_raw=_field(node, "totalAcceptedRaw", as_int, "stats"),
        total_submission_raw=_field(node, "totalSubmissionRaw", as_int, "stats"),
        rate=_field(node, "acRate", as_str, "stats"),
    )


def decode_code_definitions(value: Any) -> Tuple[CodeDefinition, ...]:
    entries = _need(as_list(loads_text(value)), "codeDefinition")
    definitions = []
    for index, entry in enumerate(entries):
        where = f"codeDefinition[{index}]"
        definitions.append(
            CodeDefinition(
                value=_field(entry, "value", as_str, where),
                text=_field(entry, "text", as_str, where),
                default_code=_field(entry, "defaultCode", as_str, where),
            )
        )
    return tuple(definitions)


def decode_metadata(value: Any) -> MetaData:
    node = _need(as_dict(loads_text(value)), "metaData")

    name = lookup(node, "name")
    if name is not MISSING and name is not None:
        name = _need(as_str(name), "metaData.name")
    else:
        name = None

    params = []
    raw_params = lookup(node, "params")
    if raw_params is not MISSING and raw_params is not None:
        for index, entry in enumerate(_need(as_list(raw_params), "metaData.params")):
            where = f"metaData.params[{index}]"
            params.append(
                Param(
                    name=_field(entry, "name", as_str, where),
                    type=_field(entry, "type", as_str, where),
                )
            )

    try:
        extra = tuple(
            sorted(
                (key, json.dumps(value, sort_keys=True))
                for key, value in node.items()
                if key not in _METADATA_KEYS
            )
        )
    except (ValueError, RecursionError):
        raise ParseError("metaData", "cannot re-encode metadata") from None

    return MetaData(
        return_type=_need(as_str(lookup(node, "return", "type")), "metaData.return.type"),
        name=name,
        params=tuple(params),
        extra=extra,
    )


def decode_question(node: Any, where: str = "question") -> Question:
    """Build a Question from a GraphQL question object whose content is not null."""
    node = _need(as_dict(node), where)
    content = lookup(node, "content")
    if content is MISSING:
        raise ParseError(f"{where}.content")

    case = _field(node, "sampleTestCase", as_str, where)
    examples = lookup(node, "exampleTestcases")
    if examples is MISSING:
        # older API shape
        all_cases = case
    else:
        all_cases = "\n".join(_need(as_str_list(examples), f"{where}.exampleTestcases"))

    return Question(
        content=as_str(content) or "",
        stats=decode_stats(lookup(node, "stats")),
        defs=decode_code_definitions(lookup(node, "codeDefinition")),
        case=case,
        all_cases=all_cases,
        metadata=decode_metadata(lookup(node, "metaData")),
        test=_field(node, "enableRunCode", as_bool, where),
        t_content=as_str(lookup(node, "translatedContent")) or "",
    )


def _question_node(data: Any) -> dict:
    return _need(as_dict(lookup(data, "data", "question")), "data.question")


def parse_question(data: Any, logger: Optional[logging.Logger] = None) -> Optional[Question]:
    """
    Parse a GraphQL question detail response.

    Returns None when ``content`` is null, which is how the API withholds
    premium questions from users who cannot see them.
    """
    logger = logger or log
    node = _question_node(data)
    content = lookup(node, "content")
    if content is MISSING:
        raise ParseError("data.question.content")
    if content is None:
        logger.debug("Question content is null, probably premium only")
        return None

    return decode_question(node, "data.question")


def parse_problem_and_question(
    data: Any, logger: Optional[logging.Logger] = None
) -> Optional[Tuple[Problem, Question]]:
    """
    Parse a GraphQL question detail response into a Problem and its Question.

    The percent comes from the rounded ``acRate`` string, so it matches the
    catalog percent only within PERCENT_TOLERANCE.
    """
    logger = logger or log
    question = parse_question(data, logger=logger)
    if question is None:
        return None

    where = "data.question"
    node = _question_node(data)
    problem = Problem(
        # display title, not the slug; they coincide for current categories
        category=_field(node, "categoryTitle", as_str, where).lower(),
        fid=_field(node, "questionFrontendId", as_int_text, where),
        id=_field(node, "questionId", as_int_text, where),
        level=difficulty_level(_field(node, "difficulty", as_str, where)),
        locked=bool(as_bool(lookup(node, "isPaidOnly"))),
        name=_field(node, "title", as_str, where),
        percent=rate_percent(question.stats.rate),
        slug=_field(node, "titleSlug", as_str, where),
        starred=_field(node, "isFavor", as_bool, where),
        status=as_str(lookup(node, "status")) or STATUS_DEFAULT,
        desc=json.dumps(question.to_api()),
    )
    logger.debug("Parsed question %s (%d)", problem.slug, problem.fid)
    return problem, question


# --- tags, daily, user ------------------------------------------------------------


def parse_tag(data: Any, logger: Optional[logging.Logger] = None) -> List[str]:
    """Question ids of a topic tag. An unknown tag (null) gives an empty list."""
    logger = logger or log
    logger.debug("Parse tags...")
    tag = lookup(data, "data", "topicTag")
    if tag is MISSING:
        raise ParseError("data.topicTag")
    if tag is None:
        return []

    questions = _need(as_list(lookup(tag, "questions")), "data.topicTag.questions")
    return [
        _field(entry, "questionId", as_str, f"data.topicTag.questions[{index}]")
        for index, entry in enumerate(questions)
    ]


def parse_daily(data: Any, logger: Optional[logging.Logger] = None) -> int:
    """Frontend id of today's daily challenge question."""
    logger = logger or log
    logger.debug("Parse daily...")
    where = "data.activeDailyCodingChallengeQuestion.question.questionFrontendId"
    fid = _need(
        as_int_text(
            lookup(
                data,
                "data",
                "activeDailyCodingChallengeQuestion",
                "question",
                "questionFrontendId",
            )
        ),
        where,
    )
    if fid <= 0:
        raise ParseError(where, f"invalid question id {fid}")
    return fid


def parse_user(data: Any, logger: Optional[logging.Logger] = None) -> Optional[UserIdentity]:
    """The logged in user, or None when the session is anonymous."""
    logger = logger or log
    user = lookup(data, "data", "user")
    if user is MISSING:
        raise ParseError("data.user")
    if user is None:
        logger.debug("No user in response, not logged in")
        return None

    user = _need(as_dict(user), "data.user")
    return UserIdentity(
        username=_field(user, "username", as_str, "data.user"),
        is_premium=_field(user, "isCurrentUserPremium", as_bool, "data.user"),
    )
