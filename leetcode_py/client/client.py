"""Main LeetCode HTTP client."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

import requests

from .models import Contest, Problem, Question, UserIdentity
from .parser import (
    ParseError,
    parse_contest,
    parse_daily,
    parse_problem_and_question,
    parse_problems,
    parse_tag,
    parse_user,
)
from ..config.global_config import GlobalConfig


log = logging.getLogger(__name__)


TAG_QUERY = """query a($slug: String!) {
  topicTag(slug: $slug) {
    questions {
      questionId
    }
  }
}"""

USER_QUERY = """query a {
  user {
    username
    isCurrentUserPremium
  }
}"""

DAILY_QUERY = """query a {
  activeDailyCodingChallengeQuestion {
    question {
      questionFrontendId
    }
  }
}"""

QUESTION_QUERY = """query a($s: String!) {
  question(titleSlug: $s) {
    title
    titleSlug
    questionId
    questionFrontendId
    categoryTitle
    content
    codeDefinition
    status
    metaData
    isPaidOnly
    exampleTestcases
    sampleTestCase
    enableRunCode
    stats
    translatedContent
    isFavor
    difficulty
  }
}"""


class LeetCodeClient:
    """
    HTTP client for the LeetCode REST and GraphQL endpoints.

    Responses are handed to the parsers untouched; this class holds no
    parsing logic of its own.
    """

    GRAPHQL_PATH = "/graphql"
    PROBLEMS_PATH = "/api/problems/{category}/"
    CONTEST_INFO_PATH = "/contest/api/info/{slug}/"
    CONTEST_REGISTER_PATH = "/contest/api/{slug}/register"
    DEFAULT_CATEGORIES = ("algorithms", "database", "shell", "concurrency")

    def __init__(
        self,
        config_path: Optional[Path] = None,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize the client."""
        self.config_path = config_path or GlobalConfig.default_path()
        self.config = GlobalConfig.load(self.config_path)
        self.session = session or requests.Session()
        self.logger = logger or log

        self.session.headers.update(
            {
                "Content-Type": "application/json",
                "Origin": self.config.base_url,
                "Referer": f"{self.config.base_url}/",
            }
        )
        if self.config.has_credentials():
            self.session.headers["x-csrftoken"] = self.config.csrftoken
            self.session.cookies.update(self.config.cookies())

    def save_credentials(self, csrftoken: str, session: str) -> None:
        """Store session cookies for future runs."""
        self.config.csrftoken = csrftoken
        self.config.session = session
        self.config.save(self.config_path)
        self.session.headers["x-csrftoken"] = csrftoken
        self.session.cookies.update(self.config.cookies())

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        response.raise_for_status()
        try:
            return response.json()
        except ValueError:
            raise ParseError("body", "response is not JSON") from None

    def _get(self, path: str, **kwargs) -> Any:
        """Make GET request and decode the JSON body."""
        url = f"{self.config.base_url}{path}"
        self.logger.debug("GET %s", url)
        return self._decode(self.session.get(url, **kwargs))

    def get_graphql(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Any:
        """POST a GraphQL query and decode the JSON body."""
        url = f"{self.config.base_url}{self.GRAPHQL_PATH}"
        payload: Dict[str, Any] = {"operationName": "a", "query": query}
        if variables is not None:
            payload["variables"] = json.dumps(variables)
        self.logger.debug("POST %s", url)
        return self._decode(self.session.post(url, json=payload))

    def get_category_problems(self, category: str) -> Any:
        """Raw problem catalog of one category."""
        self.logger.debug("Requesting %s problems...", category)
        return self._get(self.PROBLEMS_PATH.format(category=category))

    def get_problems(self, categories: Optional[Iterable[str]] = None) -> List[Problem]:
        """Problems of all given categories, accumulated into one list."""
        problems: List[Problem] = []
        for category in categories or self.DEFAULT_CATEGORIES:
            parse_problems(problems, self.get_category_problems(category), logger=self.logger)
        return problems

    def get_question_ids_by_tag(self, slug: str) -> List[str]:
        """Question ids belonging to a topic tag."""
        data = self.get_graphql(TAG_QUERY, {"slug": slug})
        return parse_tag(data, logger=self.logger)

    def get_user_info(self) -> Optional[UserIdentity]:
        """Current user, or None when not logged in."""
        return parse_user(self.get_graphql(USER_QUERY), logger=self.logger)

    def get_question_daily(self) -> int:
        """Frontend id of today's question."""
        self.logger.debug("Requesting daily problem...")
        return parse_daily(self.get_graphql(DAILY_QUERY), logger=self.logger)

    def get_contest_info(self, slug: str) -> Contest:
        """Contest detail; the REST endpoint also reports registration status."""
        self.logger.debug("Requesting %s detail...", slug)
        data = self._get(self.CONTEST_INFO_PATH.format(slug=slug))
        return parse_contest(data, logger=self.logger)

    def register_contest(self, slug: str) -> None:
        """Register the logged in user for a contest."""
        url = f"{self.config.base_url}{self.CONTEST_REGISTER_PATH.format(slug=slug)}"
        self.logger.debug("POST %s", url)
        self.session.post(url, json={}).raise_for_status()

    def get_question_detail(self, slug: str) -> Optional[Tuple[Problem, Question]]:
        """Problem and full question; None when the content is premium-gated."""
        data = self.get_graphql(QUESTION_QUERY, {"s": slug})
        return parse_problem_and_question(data, logger=self.logger)
