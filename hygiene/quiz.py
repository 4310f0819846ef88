"""
Quiz Module for Password Hygiene Coach

Quiz records and the logic behind a quiz run:
- Parsing quiz records from JSON-style dictionaries
- Presenting options in random order while tracking the correct answer
- Ordering questions, scoring answers and summarising the result

Lesson content is owned by the caller. This module only needs
(question, options, correct_index) records, typically from a JSON file.
"""

import json
import logging
import math
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from .permutation import remap_correct_option, shuffled
from .validation import PASSING_RATIO

logger = logging.getLogger(__name__)


class QuizDataError(ValueError):
    """Raised when a quiz record is malformed or its correct index is unusable."""
    pass

# ==============================================================================
# QUIZ RECORDS
# ==============================================================================

class Quiz(NamedTuple):
    """A single multiple choice question."""
    question: str
    options: Tuple[str, ...]
    correct_index: int

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_index]

    @classmethod
    def from_dict(cls, data: Dict) -> 'Quiz':
        """
        Build a Quiz from a decoded JSON object.

        Accepts both 'correct_index' and 'correctIndex' for the answer position.

        Raises:
            QuizDataError: If options are missing or the index is not a valid position
        """
        if not isinstance(data, dict):
            raise QuizDataError("Quiz record must be an object")

        question = str(data.get('question') or '').strip() or 'Missing Question Text'

        raw_options = data.get('options')
        if not isinstance(raw_options, list) or not raw_options:
            raise QuizDataError(f"Quiz '{question}' has no options")
        options = tuple(str(option) for option in raw_options)

        raw_index = data.get('correct_index')
        if raw_index is None:
            raw_index = data.get('correctIndex')
        if isinstance(raw_index, bool) or not isinstance(raw_index, int):
            raise QuizDataError(f"Quiz '{question}' has no usable correct index")

        if not 0 <= raw_index < len(options):
            raise QuizDataError(
                f"Quiz '{question}' correct index {raw_index} is out of range "
                f"for {len(options)} option(s)"
            )

        return cls(question, options, raw_index)

    def to_dict(self) -> Dict:
        return {
            'question': self.question,
            'options': list(self.options),
            'correct_index': self.correct_index,
        }

    def with_shuffled_options(self, source=None) -> 'Quiz':
        """Return a copy with options in random order and the correct index remapped."""
        result = remap_correct_option(self.options, self.correct_index, source)
        return Quiz(self.question, result.items, result.correct_index)


def parse_quizzes(document) -> List[Quiz]:
    """Parse a decoded JSON document: a list of records or {"quizzes": [...]}."""
    if isinstance(document, dict):
        document = document.get('quizzes')

    if not isinstance(document, list):
        raise QuizDataError("Quiz document must be a list of quizzes or contain a 'quizzes' list")

    return [Quiz.from_dict(record) for record in document]


def load_quizzes(path: str) -> List[Quiz]:
    """
    Load quiz records from a JSON file.

    Raises:
        QuizDataError: If the file is not valid JSON or a record is invalid
        OSError: If the file cannot be read
    """
    with open(path, 'r', encoding='utf-8') as f:
        try:
            document = json.load(f)
        except json.JSONDecodeError as e:
            raise QuizDataError(f"Invalid quiz file '{path}': {e}") from e

    quizzes = parse_quizzes(document)
    logger.debug("Loaded %d quiz question(s) from %s", len(quizzes), path)
    return quizzes

# ==============================================================================
# QUIZ SESSION
# ==============================================================================

class QuizResults(NamedTuple):
    """Final summary of a quiz run."""
    score: int
    total: int
    passing_score: int
    passed: bool
    percentage: float
    message: str


def passing_score_for(total: int) -> int:
    """Questions needed to pass: 75% of the total, rounded up."""
    return math.ceil(total * PASSING_RATIO)


def result_message(percentage: float) -> str:
    if percentage >= 1.0:
        return "Perfect Score!"
    if percentage >= 0.9:
        return "Great Job!"
    if percentage >= 0.7:
        return "Mission Accomplished!"
    return "Keep Trying!"


class QuizSession:
    """
    One run through a set of quizzes.

    Question order is shuffled once at start and every question's options are
    shuffled with their correct index remapped. Answers are given as positions
    in the presented (shuffled) option list.

    Example:
        >>> session = QuizSession([Quiz("2+2?", ("3", "4"), 1)])
        >>> quiz = session.current
        >>> session.submit(quiz.correct_index)
        True
        >>> session.finished
        True
    """

    def __init__(self, quizzes: Sequence[Quiz], source=None):
        if not quizzes:
            raise QuizDataError("A quiz session needs at least one question")

        self.quizzes: List[Quiz] = [
            quiz.with_shuffled_options(source) for quiz in shuffled(quizzes, source)
        ]
        self.position = 0
        self.score = 0
        self.answers: List[int] = []

    @property
    def total(self) -> int:
        return len(self.quizzes)

    @property
    def finished(self) -> bool:
        return self.position >= len(self.quizzes)

    @property
    def current(self) -> Optional[Quiz]:
        return None if self.finished else self.quizzes[self.position]

    def submit(self, option_index: int) -> bool:
        """
        Record an answer for the current question and move to the next one.

        Returns:
            bool: True if the answer was correct

        Raises:
            RuntimeError: If the session is already finished
            IndexError: If option_index is not one of the presented options
        """
        quiz = self.current
        if quiz is None:
            raise RuntimeError("Quiz session is already finished")

        if isinstance(option_index, bool) or not 0 <= option_index < len(quiz.options):
            raise IndexError(f"Option {option_index} does not exist for this question")

        correct = option_index == quiz.correct_index
        if correct:
            self.score += 1

        self.answers.append(option_index)
        self.position += 1
        return correct

    def results(self) -> QuizResults:
        total = self.total
        percentage = self.score / total if total else 0.0
        passing = passing_score_for(total)
        return QuizResults(
            score=self.score,
            total=total,
            passing_score=passing,
            passed=self.score >= passing,
            percentage=percentage,
            message=result_message(percentage),
        )


__all__ = [
    'QuizDataError',
    'Quiz',
    'QuizResults',
    'QuizSession',
    'parse_quizzes',
    'load_quizzes',
    'passing_score_for',
]
