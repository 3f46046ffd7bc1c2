from dataclasses import dataclass

from fs_shell.utils.tokenizer import split_quoted


@dataclass(frozen=True)
class CommandLine:
    """One tokenized input line; the first token is the command name."""

    tokens: tuple[str, ...]

    @classmethod
    def parse(cls, raw: str) -> "CommandLine":
        return cls(tuple(split_quoted(raw)))

    @property
    def is_blank(self) -> bool:
        return not self.tokens

    @property
    def name(self) -> str:
        return self.tokens[0] if self.tokens else ""

    @property
    def args(self) -> tuple[str, ...]:
        return self.tokens[1:]

    @property
    def argc(self) -> int:
        """Total number of tokens, command name included."""
        return len(self.tokens)

    def arg(self, index: int, default: str | None = None) -> str | None:
        """Return token ``index`` (1-based after the name) or ``default``."""
        if index < len(self.tokens):
            return self.tokens[index]
        return default
