# PassgenUI
# (terminal output, clipboard)
#

import sys

from blessed import Terminal
import pyperclip


class PassgenUI:

    """Print results to terminal, optionally copy password to clipboard."""

    def __init__(self):
        # styling only when stdout is a terminal
        self._term = Terminal(stream=sys.stdout)

    def _copy(self, text):
        """Wraps copy-to-clipboard function to allow overriding."""
        pyperclip.copy(text)

    def show_password(self, password: str):
        print(self._term.bold(password))

    def copy_password(self, password: str) -> bool:
        """Copy to clipboard. Failure is only a warning, the password was already shown."""
        try:
            self._copy(password)
        except pyperclip.PyperclipException as e:
            self.warning(f"Error copying to clipboard: {e}")
            return False
        print("Password copied to clipboard!")
        return True

    def warning(self, msg):
        print(self._term.yellow(f"WARNING: {msg}"))

    def error(self, msg):
        print(self._term.red(f"Error: {msg}"))

    def show_stats(self, name, stats):
        t = self._term
        print(t.bold(name))
        print("number of words:", stats.count)
        print("longest word:", stats.longest, f"({len(stats.longest)})")
        print("shortest word:", stats.shortest, f"({len(stats.shortest)})")
        for length, count in stats.by_length:
            print(f"{length:>4} letters: {count}")
