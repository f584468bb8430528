"""Terminal rendering for localhelp."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from localhelp.core.process import ProcessResult
from localhelp.core.types import LLMResponse

DOCS_RULE = "═" * 24
RESPONSE_RULE = "═" * 27
EXEC_RULE = "─" * 25
AFFIRMATIVE_ANSWERS = ("y", "Y", "yes")

USAGE_LINES = (
    "Usage: localhelp <command> [subcommand] [args...] ['query']",
    "Example: localhelp git reset 'I want to unstage changes but keep them'",
    "Example: localhelp docker ps 'show only running containers'",
)


class Renderer:
    """CLI renderer using Rich for terminal output."""

    def __init__(self, console: Console | None = None, error_console: Console | None = None) -> None:
        self.console: Console = console or Console(soft_wrap=True, highlight=False, emoji=False)
        self.error_console: Console = error_console or Console(
            stderr=True, soft_wrap=True, highlight=False, emoji=False
        )

    def usage(self) -> None:
        for line in USAGE_LINES:
            self._print(line)

    def error(self, message: str) -> None:
        """Render a fatal error message."""
        self.error_console.print(f"[bold red]Error:[/bold red] {escape(message)}")

    def documentation(self, command: str, content: str) -> None:
        self._print(f"📖 Documentation for {command}:")
        self._print(DOCS_RULE)
        self._print(content)

    def documentation_missing(self, command: str) -> None:
        """Notice shown before querying the model without documentation."""
        self._print(f"ℹ️  No man page or help content found for '{command}'")

    def no_documentation(self, command: str) -> None:
        self._print(f"❌ No documentation found for '{command}' and no query provided.")
        self._print(f"Usage: localhelp {command} 'your question here'")

    def llm_response(self, response: LLMResponse) -> None:
        self._print("\n🤖 AI Assistant Response:")
        self._print(RESPONSE_RULE)
        self._section("📋 EXPLANATION:", response.explanation)
        self._optional_section("💻 RECOMMENDED COMMAND:", response.recommended_command)
        self._optional_section("⚠️  WARNINGS:", response.warnings)
        self._optional_section("💡 ADDITIONAL INFO:", response.additional_info)
        self._print(f"\n{RESPONSE_RULE}")

    def confirm_execution(self, command: str) -> bool:
        """Ask whether to run `command`. End of input counts as no."""

        self._print("\n🚀 Execute Command?")
        self._print(f"Command: {command}")
        try:
            answer = self.console.input("Run this command? (y/N): ")
        except EOFError:
            return False
        return answer.strip() in AFFIRMATIVE_ANSWERS

    def not_executed(self) -> None:
        self._print("\n🚫 Command not executed.")

    def executing(self, command: str) -> None:
        self._print(f"\n⚡ Executing: {command}")
        self._print(EXEC_RULE)

    def execution_failed(self, message: str) -> None:
        self._print(f"❌ {message}")

    def execution_result(self, result: ProcessResult) -> None:
        if result.stdout:
            self._print(f"\n📤 Output:\n{result.stdout.rstrip()}")
        if result.stderr:
            self._print(f"\n📤 Error output:\n{result.stderr.rstrip()}")
        if result.ok:
            self._print("\n✅ Command executed successfully!")
        else:
            self._print(f"\n❌ Command failed with exit code: {result.returncode}")

    def _optional_section(self, title: str, body: str | None) -> None:
        if body is None or body == "NONE":
            return
        self._section(title, body)

    def _section(self, title: str, body: str) -> None:
        self._print(f"\n[bold]{title}[/bold]\n{escape(body)}", markup=True)

    def _print(self, message: str, *, markup: bool = False) -> None:
        self.console.print(message, markup=markup)
