"""
Password Hygiene Coach User Interface Components

This module provides display and interaction utilities for the coach's
command-line front end. It includes:
- Masked display of generated passwords
- The strength meter and improvement suggestions
- Quiz question and result display
- Secure clipboard operations with auto-clear functionality

Dependencies: pyperclip for cross-platform clipboard support
"""

import threading
import time
from typing import List, Optional

import pyperclip

from .quiz import Quiz, QuizResults
from .strength import StrengthLabel, StrengthRating
from .validation import CLIPBOARD_TIMEOUT

# ==============================================================================
# PASSWORD DISPLAY
# ==============================================================================

def mask_password(password: str) -> str:
    """
    Partially mask a password for display.

    Shows the first and last 3 characters and masks the middle. Passwords of
    6 characters or fewer are masked completely.

    Example:
        >>> mask_password("k8#pL@9qT2$z")
        'k8#******2$z'
    """
    if len(password) <= 6:
        return '*' * len(password)
    return f"{password[:3]}{'*' * (len(password) - 6)}{password[-3:]}"


STRENGTH_ICONS = {
    StrengthLabel.VERY_WEAK: '🔴',
    StrengthLabel.WEAK: '🟠',
    StrengthLabel.MODERATE: '🟡',
    StrengthLabel.STRONG: '🟢',
    StrengthLabel.VERY_STRONG: '✅',
}


def render_meter(progress: float, length: int = 30) -> str:
    """
    Render the strength meter as a text bar.

    Example:
        >>> render_meter(0.5, length=10)
        '|█████░░░░░|'
    """
    filled_length = int(round(length * min(1.0, max(0.0, progress))))
    return '|' + '█' * filled_length + '░' * (length - filled_length) + '|'


def format_strength_lines(rating: StrengthRating, length: int) -> List[str]:
    """Build the lines of the strength analysis view without printing them."""
    icon = STRENGTH_ICONS.get(rating.label, '⚪')
    lines = [
        f"Length:    {length} characters",
        f"Strength:  {icon} {rating.label.display_name} (~{rating.bits:.1f} bits, estimate)",
        f"Pool size: {rating.pool_size}",
        f"Meter:     {render_meter(rating.progress)}",
    ]

    if rating.suggestions:
        lines.append("")
        lines.append("Suggestions:")
        lines.extend(f"  - {suggestion}" for suggestion in rating.suggestions)
    else:
        lines.append("")
        lines.append("No suggestions - looks good!")

    return lines


def display_password_strength(rating: StrengthRating, length: int) -> None:
    """
    Display a strength analysis in a user-friendly format.

    Output Example:
        ==================================================
        PASSWORD STRENGTH ANALYSIS
        ==================================================
        Length:    16 characters
        Strength:  ✅ Very Strong (~104.9 bits, estimate)
        Pool size: 94
        Meter:     |██████████████████████████████|

        No suggestions - looks good!
        ==================================================
    """
    print("=" * 50)
    print("PASSWORD STRENGTH ANALYSIS")
    print("=" * 50)
    for line in format_strength_lines(rating, length):
        print(line)
    print("=" * 50)

# ==============================================================================
# QUIZ DISPLAY
# ==============================================================================

def display_quiz_question(quiz: Quiz, number: int, total: int) -> None:
    """Print a question with its options numbered from 1."""
    print(f"\nQuestion {number}/{total}: {quiz.question}")
    for i, option in enumerate(quiz.options, 1):
        print(f"  {i}. {option}")


def display_quiz_results(results: QuizResults) -> None:
    print("=" * 50)
    print(results.message)
    print("=" * 50)
    print(f"Score:   {results.score} / {results.total} ({results.percentage:.0%})")
    print(f"Passing: {results.passing_score} / {results.total}")
    print(f"Result:  {'Passed' if results.passed else 'Not passed - retry the quiz'}")
    print("=" * 50)

# ==============================================================================
# CLIPBOARD MANAGEMENT
# ==============================================================================

def copy_to_clipboard(text: str, timeout: int = CLIPBOARD_TIMEOUT) -> bool:
    """
    Copy text to system clipboard with optional auto-clear timeout.

    Args:
        text (str): The text to copy to clipboard
        timeout (int): Number of seconds after which to clear clipboard.
                      Set to 0 to disable auto-clear. Default: 30 seconds

    Returns:
        bool: True if text was successfully copied, False otherwise

    Security Features:
        - Auto-clears clipboard after timeout
        - Only clears if clipboard still contains the original text
        - Uses a daemon thread so it never blocks application exit
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        print(f"[-] Clipboard error: {e}")
        return False

    if timeout > 0:
        def clear_later():
            time.sleep(timeout)
            try:
                # Leave the clipboard alone if the user copied something else
                if pyperclip.paste() == text:
                    pyperclip.copy("")
            except pyperclip.PyperclipException:
                pass  # clipboard went away; nothing left to clear

        threading.Thread(target=clear_later, daemon=True).start()

    return True


def clear_clipboard() -> bool:
    """Clear the system clipboard immediately."""
    try:
        pyperclip.copy("")
        return True
    except pyperclip.PyperclipException:
        return False


def get_clipboard() -> Optional[str]:
    try:
        return pyperclip.paste()
    except pyperclip.PyperclipException:
        return None
