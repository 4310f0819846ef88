#!/usr/bin/env python3
"""
Password Hygiene Coach v1.0.0
A terminal companion for practising password hygiene: generate strong
passwords, check how strong a password is, and test your knowledge with
lesson quizzes.

Passwords are never written to disk or logged.
"""

# ==============================================================================
# STANDARD LIBRARY IMPORTS
# ==============================================================================
import argparse
import logging
import sys

# ==============================================================================
# THIRD-PARTY LIBRARY IMPORTS
# ==============================================================================
from prompt_toolkit import prompt
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.validation import ValidationError, Validator

# ==============================================================================
# CUSTOM MODULE IMPORTS
# ==============================================================================
from hygiene import charsets, password_generator, quiz, strength, ui, validation
from hygiene.randomness import RandomUnavailable

# ==============================================================================
# CONSTANTS AND GLOBAL CONFIGURATION
# ==============================================================================

BANNER = r"""
  ___                              _   _  _          _
 | _ \__ _______ __ _____ _ _ __| | | || |_  _ __ _(_)___ _ _  ___
 |  _/ _` (_-<_-< V  V / _ \ '_/ _` | | __ | || / _` | / -_) ' \/ -_)
 |_| \__,_/__/__/\_/\_/\___/_| \__,_| |_||_|\_, \__, |_\___|_||_\___|
                                            |__/|___/        Coach v1.0.0
"""

# Interactive command help menu
MAIN_MENU_INTERACTIVE = f"""
{BANNER}
Welcome to the Password Hygiene Coach!
Here are the available commands you can use:

'gen_passwd' (gp) - Generate a random password from selected character types
'seed_passwd' (sp) - Generate a password around characters you choose
'check_passwd' (cp) - Analyse the strength of a password (input is hidden)
'quiz' (qz) - Take a quiz from a lesson file
'help' (h) - Show this help message
'exit' (quit, q) - Exit the program

Type 'help' or 'h' for this menu anytime.
Use ↑/↓ arrows for command history.
"""

# Command aliases for user convenience (full names and abbreviations)
COMMAND_ALIASES = {
    'gen_passwd': 'gen_passwd',
    'seed_passwd': 'seed_passwd',
    'check_passwd': 'check_passwd',
    'quiz': 'quiz',
    'help': 'help',
    'exit': 'exit',
    'quit': 'exit',

    # Abbreviations
    'gp': 'gen_passwd',
    'sp': 'seed_passwd',
    'cp': 'check_passwd',
    'qz': 'quiz',
    'h': 'help',
    'q': 'exit',
}

logger = logging.getLogger("coach")

# ==============================================================================
# VALIDATORS
# ==============================================================================

class NumberValidator(Validator):
    """Validator for numeric input fields."""

    def validate(self, document):
        """Ensure input contains only digits."""
        text = document.text
        if text and not text.isdecimal():
            raise ValidationError(message='Please enter a valid number')


class LengthValidator(Validator):
    """Validator for password length prompts (blank input means default)."""

    def validate(self, document):
        text = document.text.strip()
        if not text:
            return
        if not text.isdecimal():
            raise ValidationError(message='Please enter a valid number')
        is_valid, message = validation.validate_length(int(text))
        if not is_valid:
            raise ValidationError(message=message)

# ==============================================================================
# MAIN COACH CLASS
# ==============================================================================

class Coach:
    """
    Application controller for the Password Hygiene Coach.

    Holds only session conveniences (command history, completion). Generated
    and checked passwords live in local variables of a single command and are
    dropped when it returns.
    """

    def __init__(self, source=None):
        """
        Args:
            source: Randomness source for every generator and shuffle.
                    Default: the secure source
        """
        self.source = source
        self.history = InMemoryHistory()
        self.auto_suggest = AutoSuggestFromHistory()
        self.completer = WordCompleter(sorted(COMMAND_ALIASES.keys()))

    # ==========================================================================
    # COMMAND RESOLUTION
    # ==========================================================================

    def _resolve_command(self, command_input):
        """
        Resolve user input to a valid command using aliases and prefix matching.

        Returns:
            str or None: Resolved command name or None if invalid/ambiguous
        """
        if not command_input:
            return None

        command_input = command_input.strip().lower()

        if command_input in COMMAND_ALIASES:
            return COMMAND_ALIASES[command_input]

        matches = [cmd for cmd in COMMAND_ALIASES if cmd.startswith(command_input)]
        resolved = {COMMAND_ALIASES[cmd] for cmd in matches}

        if len(resolved) == 1:
            return resolved.pop()
        elif len(resolved) > 1:
            print(f"[-] Ambiguous command '{command_input}'. Could be: {', '.join(sorted(matches))}")
            return None

        print(f"[-] Unknown command: '{command_input}'")
        print("[i] Type 'help' or 'h' for available commands")
        return None

    # ==========================================================================
    # PASSWORD GENERATION
    # ==========================================================================

    def _present_password(self, password, reveal=False, copy=False):
        """Show a generated password (masked unless revealed) with its strength."""
        if reveal:
            print(f"Generated password: {password}")
        else:
            print(f"Generated password: {ui.mask_password(password)}")

        rating = strength.evaluate_password(password)
        print(f"Security assessment: {rating.label.display_name} "
              f"(~{rating.bits:.1f} bits, estimate)")

        if copy and ui.copy_to_clipboard(password):
            print(f"[+] Password copied to clipboard ({validation.CLIPBOARD_TIMEOUT} second retention)")

    def generate_password(self, length=None, classes=None, reveal=False, copy=False):
        """
        Generate and display a random password.

        Prompts for the length when it is not given. Returns the password, or
        None when the request was rejected.
        """
        if length is None:
            length_input = prompt(
                f"Password length [{validation.DEFAULT_PASSWORD_LENGTH}]: ",
                validator=LengthValidator()
            )
            length = validation.parse_length(length_input)

        if classes is None:
            classes = charsets.CLASS_NAMES
        elif isinstance(classes, str):
            classes = [classes]

        try:
            password = password_generator.generate_secure_password(length, classes, self.source)
        except password_generator.InvalidRequest as e:
            print(f"[-] {e}")
            return None

        if length < len(charsets.resolve_classes(classes)):
            print(f"[i] Only the first {length} character type(s) are guaranteed at this length")

        self._present_password(password, reveal=reveal, copy=copy)
        return password

    def generate_from_seed(self, characters=None, length=None, reveal=False, copy=False):
        """
        Generate a password that contains the given characters.

        Returns the password, or None when the characters do not fit.
        """
        if characters is None:
            characters = prompt("Characters to include (e.g., abcDEF123!@#): ")

        if length is None:
            length_input = prompt(
                f"Password length [{validation.DEFAULT_PASSWORD_LENGTH}]: ",
                validator=LengthValidator()
            )
            length = validation.parse_length(length_input)

        try:
            password = password_generator.generate_password_from_seed(length, characters, self.source)
        except password_generator.InvalidRequest as e:
            print(f"[-] {e}")
            return None

        self._present_password(password, reveal=reveal, copy=copy)
        return password

    # ==========================================================================
    # STRENGTH CHECK
    # ==========================================================================

    def check_password(self, password=None):
        """Analyse a password and print the strength meter and suggestions."""
        if password is None:
            password = prompt("Password to check: ", is_password=True)

        rating = strength.evaluate_password(password)
        ui.display_password_strength(rating, len(password))
        return rating

    # ==========================================================================
    # QUIZZES
    # ==========================================================================

    def run_quiz(self, path=None):
        """Run an interactive quiz loaded from a JSON lesson file."""
        if path is None:
            path = prompt("Quiz file: ").strip()

        try:
            quizzes = quiz.load_quizzes(path)
            session = quiz.QuizSession(quizzes, self.source)
        except quiz.QuizDataError as e:
            print(f"[-] {e}")
            return None
        except OSError as e:
            print(f"[-] Cannot read quiz file: {e}")
            return None

        while not session.finished:
            current = session.current
            ui.display_quiz_question(current, session.position + 1, session.total)

            answer = prompt(
                f"Your answer [1-{len(current.options)}]: ",
                validator=NumberValidator()
            ).strip()

            if not answer.isdecimal() or not 1 <= int(answer) <= len(current.options):
                print(f"[-] Choose an option between 1 and {len(current.options)}")
                continue

            if session.submit(int(answer) - 1):
                print("[+] Correct!")
            else:
                print(f"[-] Incorrect. The answer was: {current.correct_option}")

        results = session.results()
        ui.display_quiz_results(results)
        return results

    # ==========================================================================
    # INTERACTIVE SHELL
    # ==========================================================================

    def interactive(self):
        """Run the interactive command loop until the user exits."""
        print(MAIN_MENU_INTERACTIVE)

        while True:
            try:
                selection = prompt(
                    "coach> ",
                    history=self.history,
                    auto_suggest=self.auto_suggest,
                    completer=self.completer
                ).strip()

                if selection == "":
                    continue

                resolved_command = self._resolve_command(selection)
                if not resolved_command:
                    continue

                if resolved_command == 'help':
                    print(MAIN_MENU_INTERACTIVE)
                elif resolved_command == 'gen_passwd':
                    self.generate_password(copy=True)
                elif resolved_command == 'seed_passwd':
                    self.generate_from_seed(copy=True)
                elif resolved_command == 'check_passwd':
                    self.check_password()
                elif resolved_command == 'quiz':
                    self.run_quiz()
                elif resolved_command == 'exit':
                    print("[+] Goodbye!")
                    break

            except KeyboardInterrupt:
                print("\n[i] Press Ctrl+D to exit or type 'exit'")
            except EOFError:
                print("\n[+] Goodbye!")
                break

# ==============================================================================
# MAIN ENTRY POINT
# ==============================================================================

def build_parser():
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="Password Hygiene Coach generates strong passwords, estimates password strength and runs lesson quizzes. Nothing you generate or check is stored.",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Show debug messages (never includes passwords)'
    )
    subparsers = parser.add_subparsers(
        dest='command',
        help='Available operations'
    )

    # Random password generation command
    gen_parser = subparsers.add_parser('generate', help='Generate a random password')
    gen_parser.add_argument(
        '--length',
        type=int,
        default=validation.DEFAULT_PASSWORD_LENGTH,
        help=f'Password length, 1-{validation.MAX_PASSWORD_LENGTH} (default: {validation.DEFAULT_PASSWORD_LENGTH})'
    )
    for cls in charsets.CHARACTER_CLASSES:
        gen_parser.add_argument(
            f'--no-{cls.name}',
            dest=f'no_{cls.name}',
            action='store_true',
            help=f'Leave out {cls.name}'
        )
    gen_parser.add_argument(
        '--reveal',
        action='store_true',
        help='Show the full generated password (default: partially masked)'
    )
    gen_parser.add_argument(
        '--copy',
        action='store_true',
        help='Copy the password to the clipboard'
    )

    # Seeded password generation command
    seed_parser = subparsers.add_parser('seed', help='Generate a password around your own characters')
    seed_parser.add_argument(
        '--characters',
        required=True,
        help='Characters that must appear in the password'
    )
    seed_parser.add_argument(
        '--length',
        type=int,
        default=validation.DEFAULT_PASSWORD_LENGTH,
        help=f'Password length, 1-{validation.MAX_PASSWORD_LENGTH} (default: {validation.DEFAULT_PASSWORD_LENGTH})'
    )
    seed_parser.add_argument('--reveal', action='store_true', help='Show the full generated password')
    seed_parser.add_argument('--copy', action='store_true', help='Copy the password to the clipboard')

    # Strength check command
    subparsers.add_parser('check', help='Analyse password strength (prompts with hidden input)')

    # Quiz command
    quiz_parser = subparsers.add_parser('quiz', help='Take a quiz from a lesson file')
    quiz_parser.add_argument('--file', required=True, help='JSON file with quiz questions')

    # Interactive shell
    subparsers.add_parser('shell', help='Start the interactive coach')

    return parser


def main(argv=None):
    """Main entry point for the Password Hygiene Coach."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    if not args.command:
        parser.print_help()
        return 0

    coach = Coach()

    try:
        if args.command == 'generate':
            classes = [cls.name for cls in charsets.CHARACTER_CLASSES
                       if not getattr(args, f'no_{cls.name}')]
            password = coach.generate_password(args.length, classes, reveal=args.reveal, copy=args.copy)
            return 0 if password is not None else 1

        elif args.command == 'seed':
            password = coach.generate_from_seed(args.characters, args.length,
                                                reveal=args.reveal, copy=args.copy)
            return 0 if password is not None else 1

        elif args.command == 'check':
            coach.check_password()

        elif args.command == 'quiz':
            return 0 if coach.run_quiz(args.file) is not None else 1

        elif args.command == 'shell':
            coach.interactive()

        else:
            parser.print_help()

    except KeyboardInterrupt:
        print("\n[-] Operation cancelled.")
        return 130
    except EOFError:
        print("\n[+] Goodbye!")
    except RandomUnavailable as e:
        print(f"\n[-] {e}")
        logger.error("Secure random source unavailable; refusing to generate")
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
