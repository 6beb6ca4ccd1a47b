"""Shared pytest fixtures: sample LeetCode responses."""

import copy
import json

import pytest


STATS = {
    "totalAccepted": "5.2M",
    "totalSubmission": "10.1M",
    "totalAcceptedRaw": 5212345,
    "totalSubmissionRaw": 10123456,
    "acRate": "51.5%",
}

CODE_DEFINITION = [
    {"value": "cpp", "text": "C++", "defaultCode": "class Solution {\npublic:\n};"},
    {"value": "python3", "text": "Python3", "defaultCode": "class Solution:\n    pass"},
]

META_DATA = {
    "name": "twoSum",
    "params": [
        {"name": "nums", "type": "integer[]"},
        {"name": "target", "type": "integer"},
    ],
    "return": {"type": "integer[]", "size": 2},
}

QUESTION = {
    "title": "Two Sum",
    "titleSlug": "two-sum",
    "questionId": "1",
    "questionFrontendId": "1",
    "categoryTitle": "Algorithms",
    "content": "<p>Given an array of integers <code>nums</code>...</p>",
    "codeDefinition": json.dumps(CODE_DEFINITION),
    "status": "ac",
    "metaData": json.dumps(META_DATA),
    "isPaidOnly": False,
    "isFavor": True,
    "difficulty": "Easy",
    "exampleTestcases": "[2,7,11,15]\n9\n[3,2,4]\n6",
    "sampleTestCase": "[2,7,11,15]\n9",
    "enableRunCode": True,
    "stats": json.dumps(STATS),
    "translatedContent": None,
}


def _pair(fid, title, slug, acs, submitted, level=1, status=None):
    return {
        "stat": {
            "question_id": fid + 1000,
            "frontend_question_id": fid,
            "question__title": title,
            "question__title_slug": slug,
            "total_acs": acs,
            "total_submitted": submitted,
        },
        "difficulty": {"level": level},
        "paid_only": False,
        "is_favor": False,
        "status": status,
    }


@pytest.fixture
def question_response():
    return {"data": {"question": copy.deepcopy(QUESTION)}}


@pytest.fixture
def problems_response():
    return {
        "category_slug": "algorithms",
        "stat_status_pairs": [
            _pair(1, "Two Sum", "two-sum", 50, 200, level=1, status="ac"),
            _pair(2, "Add Two Numbers", "add-two-numbers", 30, 100, level=2, status="notac"),
            _pair(4, "Median of Two Sorted Arrays", "median-of-two-sorted-arrays", 0, 0, level=3),
        ],
    }


@pytest.fixture
def contest_response():
    return {
        "contest": {
            "id": 512,
            "duration": 5400,
            "start_time": 1652580000,
            "title": "Weekly Contest 293",
            "title_slug": "weekly-contest-293",
            "description": "<p>Good luck</p>",
            "is_virtual": False,
        },
        "questions": [
            {"question_id": 2273, "credit": 3, "title": "Find Resultant Array", "title_slug": "find-resultant-array-after-removing-anagrams"},
            {"question_id": 2274, "credit": 4, "title": "Maximum Consecutive Floors", "title_slug": "maximum-consecutive-floors-without-special-floors"},
        ],
        "containsPremium": False,
        "registered": True,
    }
